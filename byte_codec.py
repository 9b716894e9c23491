"""Conversion between text and byte sequences."""

LATIN1 = 'latin-1'
UTF8 = 'utf-8'

ENCODINGS = (LATIN1, UTF8)


class InvalidCharacter(ValueError):
    def __init__(self, code_point, position):
        super().__init__(f'Bad character code ({code_point}) at position {position}')
        self.code_point = code_point
        self.position = position


def _check_encoding(encoding):
    if encoding not in ENCODINGS:
        raise ValueError(f'Unsupported encoding: {encoding!r}')


def string_to_bytes(text, encoding=LATIN1):
    """Map each character to one byte (Latin-1) or to its UTF-8 bytes."""
    _check_encoding(encoding)
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as e:
        raise InvalidCharacter(ord(text[e.start]), e.start) from e


def bytes_to_string(in_bytes, encoding=LATIN1):
    _check_encoding(encoding)
    return bytes(in_bytes).decode(encoding)


if __name__ == '__main__':
    text = 'Café au lait, s’il vous plaît'

    data = string_to_bytes(text, encoding=UTF8)
    print(f'UTF-8: {len(text)} characters -> {len(data)} bytes')
    print(f'Round trip matches: {bytes_to_string(data, encoding=UTF8) == text}')

    try:
        string_to_bytes(text)
    except InvalidCharacter as e:
        print(f'Latin-1: {e}')
