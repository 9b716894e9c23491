"""Tests for the bit_stream module."""

from bit_stream import BitStreamReader, BitStreamWriter


def read_all(reader, switch_at=None, width=None):
    codes = []
    while True:
        code = reader.shift()
        if code is None:
            return codes
        codes.append(code)
        if len(codes) == switch_at:
            reader.set_bits_per_code(width)


class TestBitStreamWriter:
    def test_empty(self):
        assert BitStreamWriter().finish() == b""

    def test_eight_bit_codes_are_plain_bytes(self):
        writer = BitStreamWriter()
        for code in (1, 2, 255):
            writer.push(code)
        assert writer.finish() == bytes([1, 2, 255])

    def test_least_significant_bit_first(self):
        writer = BitStreamWriter().set_bits_per_code(9)
        writer.push(0x1FF)
        writer.push(0)
        # 9 ones then 9 zeros, padded to 3 bytes
        assert writer.finish() == bytes([0xFF, 0x01, 0x00])

    def test_partial_byte_is_zero_padded(self):
        writer = BitStreamWriter().set_bits_per_code(4)
        writer.push(0xA)
        assert writer.finish() == bytes([0x0A])

    def test_codes_span_byte_boundaries(self):
        writer = BitStreamWriter().set_bits_per_code(12)
        writer.push(0xABC)
        writer.push(0x123)
        assert writer.finish() == bytes([0xBC, 0x3A, 0x12])

    def test_codes_written(self):
        writer = BitStreamWriter()
        for code in range(5):
            writer.push(code)
        assert writer.codes_written == 5


class TestBitStreamReader:
    def test_reads_bytes(self):
        assert read_all(BitStreamReader(bytes([7, 8, 9]))) == [7, 8, 9]

    def test_empty(self):
        assert BitStreamReader(b"").shift() is None

    def test_trailing_bits_are_not_a_code(self):
        reader = BitStreamReader(bytes([0xFF, 0x01, 0x00])).set_bits_per_code(9)
        assert reader.shift() == 0x1FF
        assert reader.shift() == 0
        assert reader.shift() is None
        assert reader.shift() is None

    def test_splits_bytes(self):
        reader = BitStreamReader(bytes([0xBC, 0x3A, 0x12])).set_bits_per_code(12)
        assert read_all(reader) == [0xABC, 0x123]


class TestRoundTrip:
    def test_width_switch_at_same_count(self):
        codes = [0, 1, 17, 128, 200, 255, 3, 99, 254, 42] + [256, 300, 0, 511, 1]
        writer = BitStreamWriter()
        for i, code in enumerate(codes):
            if i == 10:
                writer.set_bits_per_code(9)
            writer.push(code)
        packed = writer.finish()

        assert len(packed) == 16
        assert read_all(BitStreamReader(packed), switch_at=10, width=9) == codes

    def test_growing_widths(self):
        codes = []
        writer = BitStreamWriter()
        for width in range(8, 17):
            writer.set_bits_per_code(width)
            for code in (0, 2**width - 1, 2**(width - 1) + 1):
                writer.push(code)
                codes.append(code)
        reader = BitStreamReader(writer.finish())

        unpacked = []
        for width in range(8, 17):
            reader.set_bits_per_code(width)
            for _ in range(3):
                unpacked.append(reader.shift())
        assert unpacked == codes
        assert reader.shift() is None
