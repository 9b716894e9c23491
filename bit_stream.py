"""Variable-width code packing, least significant bit first.

Codes are laid out back to back with no alignment: bit i of the stream
is bit (i % 8) of byte (i // 8). The writer and the reader each keep a
code width that the caller may change between codes; both sides have to
change it after the same number of codes for the stream to read back.
"""

from bitstring import Bits, BitArray

DEFAULT_BITS_PER_CODE = 8


class BitStreamWriter:
    def __init__(self):
        self.bits_per_code = DEFAULT_BITS_PER_CODE
        self.codes_written = 0
        self.data = bytearray()
        self.remainder = BitArray()

    def set_bits_per_code(self, n):
        self.bits_per_code = n
        return self

    def push(self, code):
        """Append a code. It must be representable in bits_per_code bits."""
        # Newer bits go on the left, so the right end holds the oldest ones
        self.remainder.prepend(Bits(uint=code, length=self.bits_per_code))
        while len(self.remainder) >= 8:
            self.data.append(self.remainder[-8:].uint)
            del self.remainder[-8:]
        self.codes_written += 1

    def finish(self):
        """Flush the partial trailing byte, zero-padded, and return the stream."""
        if len(self.remainder) > 0:
            self.data.append(self.remainder.uint)
            self.remainder = BitArray()
        return bytes(self.data)


class BitStreamReader:
    def __init__(self, in_bytes):
        self.bits_per_code = DEFAULT_BITS_PER_CODE
        self.bytez = bytes(in_bytes)
        self.pos = 0
        self.remainder = BitArray()

    def set_bits_per_code(self, n):
        self.bits_per_code = n
        return self

    def shift(self):
        """Read the next code, or None if fewer than bits_per_code bits are left."""
        n = self.bits_per_code
        while len(self.remainder) < n:
            if self.pos >= len(self.bytez):
                return None
            self.remainder.prepend(Bits(uint=self.bytez[self.pos], length=8))
            self.pos += 1
        code = self.remainder[-n:].uint
        del self.remainder[-n:]
        return code


if __name__ == '__main__':
    codes = list(range(0, 250, 25)) + [256, 300, 411, 500, 511]

    writer = BitStreamWriter()
    for i, code in enumerate(codes):
        if i == 10:
            writer.set_bits_per_code(9)
        writer.push(code)
    packed = writer.finish()

    reader = BitStreamReader(packed)
    unpacked = []
    while True:
        code = reader.shift()
        if code is None:
            break
        unpacked.append(code)
        if len(unpacked) == 10:
            reader.set_bits_per_code(9)

    print(f'Packed {len(codes)} codes into {len(packed)} bytes: {packed.hex()}')
    print(f'Read back matches: {unpacked == codes}')
