"""Move-to-front transform over the full byte alphabet."""

from collections.abc import MutableSequence


def _output_buffer(in_bytes, in_place):
    if in_place:
        if not isinstance(in_bytes, MutableSequence):
            raise ValueError(
                f'in_place needs a mutable buffer (bytearray or list), got {type(in_bytes).__name__}')
        return in_bytes
    return bytearray(len(in_bytes))


def move_to_front_transform(in_bytes, in_place=False):
    symbols = [i for i in range(256)]
    out = _output_buffer(in_bytes, in_place)
    for n, c in enumerate(in_bytes):
        i = symbols.index(c)
        del symbols[i]
        symbols.insert(0, c)
        out[n] = i
    return out if in_place else bytes(out)


def move_to_front_reverse_transform(in_bytes, in_place=False):
    symbols = [i for i in range(256)]
    out = _output_buffer(in_bytes, in_place)
    for n, i in enumerate(in_bytes):
        c = symbols.pop(i)
        symbols.insert(0, c)
        out[n] = c
    return out if in_place else bytes(out)


if __name__ == '__main__':
    with open('test.dat', 'rb') as f:
        input_data = f.read()

    enc = move_to_front_transform(input_data)
    dec = move_to_front_reverse_transform(enc)

    print(f'Decoded data matches original: {input_data == dec}')
    print(f'Zero indexes after transform: {enc.count(0)} of {len(enc)}')
