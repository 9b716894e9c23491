"""Adaptive LZW encoding and decoding.

Codes start 8 bits wide. In the default (adaptive) mode the width grows
by one bit every time the code counter doubles, and codes are packed
into bytes with a BitStreamWriter. Once the width would pass max_bits
the dictionary is frozen: no clear code is ever emitted, and both sides
simply stop adding entries.

In fixed-width mode the codes are returned as a plain list of ints and
the width never changes.
"""

from functools import partial

from bit_stream import BitStreamReader, BitStreamWriter

DEFAULT_MAX_BITS = 16
FIRST_CODE_LEN = 8
LITERAL_CODES = 2**FIRST_CODE_LEN


class InvalidCode(ValueError):
    pass


def lzw_encode(in_bytes, max_bits=DEFAULT_MAX_BITS, fixed_width=False):
    if len(in_bytes) == 0:
        return [] if fixed_width else b''

    code_len = FIRST_CODE_LEN
    code = 2**code_len - 1
    code_limit = 2**code_len
    out = [] if fixed_width else BitStreamWriter()
    emit = out.append if fixed_width else out.push

    # (prefix code, next byte) -> code. Single bytes are their own code.
    dictionary = {}
    phrase = in_bytes[0]
    for c in in_bytes[1:]:
        if (phrase, c) in dictionary:
            phrase = dictionary[(phrase, c)]
            continue

        emit(phrase)
        code += 1
        if code == code_limit and not fixed_width:
            code_limit *= 2
            code_len += 1
            if code_len <= max_bits:
                out.set_bits_per_code(code_len)

        if code_len <= max_bits:
            dictionary[(phrase, c)] = code
        phrase = c

    emit(phrase)
    return out if fixed_width else out.finish()


def lzw_decode(in_data, max_bits=DEFAULT_MAX_BITS, fixed_width=False):
    if fixed_width:
        read_code = partial(next, iter(in_data), None)
    else:
        in_stream = BitStreamReader(in_data)
        read_code = in_stream.shift

    first = read_code()
    if first is None:
        return b''
    if first >= LITERAL_CODES:
        raise InvalidCode(f'First code must be a literal, got {first}')

    code_len = FIRST_CODE_LEN
    code = 2**code_len
    code_limit = code
    dictionary = {}
    old_phrase = bytes([first])
    out_array = bytearray(old_phrase)
    while True:
        if code == code_limit and not fixed_width:
            code_limit *= 2
            code_len += 1
            if code_len <= max_bits:
                in_stream.set_bits_per_code(code_len)

        k = read_code()
        if k is None:
            break

        growing = code_len <= max_bits
        if k < LITERAL_CODES:
            phrase = bytes([k])
        elif k in dictionary:
            phrase = dictionary[k]
        elif k == code and growing:
            # The encoder used the entry it added one step ago
            phrase = old_phrase + old_phrase[:1]
        else:
            raise InvalidCode(f'Unknown code {k}, next code is {code}')
        out_array += phrase

        if growing:
            dictionary[code] = old_phrase + phrase[:1]
            code += 1
        old_phrase = phrase

    return bytes(out_array)


if __name__ == '__main__':
    with open('test.dat', 'rb') as f:
        orig = f.read()

    for max_bits in (9, 12, DEFAULT_MAX_BITS):
        enc = lzw_encode(orig, max_bits=max_bits)
        dec = lzw_decode(enc, max_bits=max_bits)
        print(f'max_bits={max_bits}')
        print(f'  Decoded data matches original: {orig == dec}')
        print(f'  Compressed size: {len(enc)} of {len(orig)}')
        print(f'  Compression ratio: {len(enc) / len(orig)}')
