"""Run-length encoding as flat (value, count) byte pairs."""

MAX_RUN_LENGTH = 255


class MalformedInput(ValueError):
    pass


def run_length_encode(in_bytes):
    out_data = bytearray()
    if len(in_bytes) == 0:
        return bytes(out_data)

    curr_ch = in_bytes[0]
    run_length = 1
    for ch in in_bytes[1:]:
        if ch == curr_ch and run_length < MAX_RUN_LENGTH:
            run_length += 1
        else:
            out_data.append(curr_ch)
            out_data.append(run_length)
            curr_ch = ch
            run_length = 1
    out_data.append(curr_ch)
    out_data.append(run_length)
    return bytes(out_data)


def run_length_decode(in_bytes):
    if len(in_bytes) % 2:
        raise MalformedInput(f'Odd data length ({len(in_bytes)}) passed to run-length decoder')
    out_data = bytearray()
    for i in range(0, len(in_bytes), 2):
        out_data += bytes([in_bytes[i]]) * in_bytes[i + 1]
    return bytes(out_data)


if __name__ == '__main__':
    with open('test.dat', 'rb') as f:
        input_data = f.read()

    enc = run_length_encode(input_data)
    dec = run_length_decode(enc)

    print(f'Decoded data matches original: {input_data == dec}')
    print(f'Original size: {len(input_data)}')
    print(f'Encoded size: {len(enc)}')
    print(f'Compression ratio: {len(enc) / len(input_data)}')
