"""Chaining the transforms into a compression pipeline.

The default chain is bzip2-like:
  - Burrows-Wheeler transform
  - Move-to-front transform
  - Run-length encoding
  - Adaptive LZW in place of Huffman coding

Any subset of the stages can be run, always in this order for encoding
and in reverse order for decoding. LZW always runs bit-packed so that
every stage consumes and produces bytes.
"""
from functools import partial

from bwt import DEFAULT_MARK, burrows_wheeler_transform, burrows_wheeler_reverse_transform
from byte_codec import LATIN1, bytes_to_string, string_to_bytes
from lzw import DEFAULT_MAX_BITS, lzw_encode, lzw_decode
from mtf import move_to_front_transform, move_to_front_reverse_transform
from rle import run_length_encode, run_length_decode

STAGES = ('bwt', 'mtf', 'rle', 'lzw')
DEFAULT_STAGES = STAGES


def _transforms(mark, max_bits):
    return {
        'bwt': (partial(burrows_wheeler_transform, mark=mark),
                partial(burrows_wheeler_reverse_transform, mark=mark)),
        'mtf': (move_to_front_transform, move_to_front_reverse_transform),
        'rle': (run_length_encode, run_length_decode),
        'lzw': (partial(lzw_encode, max_bits=max_bits),
                partial(lzw_decode, max_bits=max_bits)),
    }


def _ordered(stages):
    unknown = [s for s in stages if s not in STAGES]
    if unknown:
        raise ValueError(f'Unknown stages: {", ".join(unknown)}')
    return [s for s in STAGES if s in stages]


def chain_encode(in_bytes, stages=DEFAULT_STAGES, mark=DEFAULT_MARK, max_bits=DEFAULT_MAX_BITS):
    transforms = _transforms(mark, max_bits)
    data = bytes(in_bytes)
    for stage in _ordered(stages):
        encode, _ = transforms[stage]
        data = encode(data)
    return data


def chain_decode(in_bytes, stages=DEFAULT_STAGES, mark=DEFAULT_MARK, max_bits=DEFAULT_MAX_BITS):
    transforms = _transforms(mark, max_bits)
    data = bytes(in_bytes)
    for stage in reversed(_ordered(stages)):
        _, decode = transforms[stage]
        data = decode(data)
    return data


def text_encode(text, encoding=LATIN1, stages=('lzw',), **options):
    """Text to compressed bytes, the way saved games are packed."""
    return chain_encode(string_to_bytes(text, encoding=encoding), stages=stages, **options)


def text_decode(in_bytes, encoding=LATIN1, stages=('lzw',), **options):
    return bytes_to_string(chain_decode(in_bytes, stages=stages, **options), encoding=encoding)


if __name__ == '__main__':
    with open('test.dat', 'rb') as f:
        input_data = f.read()

    mark = next(c for c in range(256) if c not in input_data)

    print('Encoding...')
    enc = chain_encode(input_data, mark=mark)

    print('Decoding...')
    dec = chain_decode(enc, mark=mark)

    assert input_data == dec
    print(f'Original size: {len(input_data)}')
    print(f'Compressed size: {len(enc)}')
    print(f'Compression ratio: {len(enc) / len(input_data)}')
