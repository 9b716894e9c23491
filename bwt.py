"""Burrows-Wheeler transform with an in-band marker byte.

Instead of returning the row index of the original string alongside the
last column, the forward transform inserts a marker byte into the last
column just before that row. The marker value must not occur in the
input, and the output is one byte longer than the input.
"""

DEFAULT_MARK = 0


class MarkerError(ValueError):
    pass


class MarkerCollision(MarkerError):
    pass


class MarkerNotFound(MarkerError):
    pass


class MultipleMarkers(MarkerError):
    pass


def sort_rotations(in_bytes):
    """Return the start indexes of all cyclic rotations in sorted order.

    Equal rotations (periodic input) keep their index order. Sorting
    by prefix doubling: after each round rank[i] orders the rotations by
    their first `width` bytes, and `width` doubles until every rotation
    has a distinct rank or the whole rotation has been compared.
    """
    n = len(in_bytes)
    rank = list(in_bytes)
    order = sorted(range(n), key=lambda i: rank[i])
    width = 1
    while width < n:
        def key(i):
            return rank[i], rank[(i + width) % n]

        order = sorted(range(n), key=key)
        new_rank = [0] * n
        for prev, curr in zip(order, order[1:]):
            new_rank[curr] = new_rank[prev] + (key(prev) != key(curr))
        rank = new_rank
        if rank[order[-1]] == n - 1:
            break
        width *= 2
    return order


def _check_mark(mark):
    if not 0 <= mark <= 255:
        raise MarkerError(f'Marker must be a byte value (0-255), got {mark}')


def burrows_wheeler_transform(in_bytes, mark=DEFAULT_MARK):
    _check_mark(mark)
    if mark in in_bytes:
        raise MarkerCollision(f'Marker {mark} detected in input')

    n = len(in_bytes)
    out_bytes = bytearray()
    orig_index = 0
    for i, start in enumerate(sort_rotations(in_bytes)):
        if start == 0:
            orig_index = i
        # Last byte of the rotation beginning at `start`
        out_bytes.append(in_bytes[start - 1 if start else n - 1])
    out_bytes.insert(orig_index, mark)
    return bytes(out_bytes)


def burrows_wheeler_reverse_transform(in_bytes, mark=DEFAULT_MARK):
    _check_mark(mark)
    orig_index = None
    numbers = bytearray()
    for i, num in enumerate(in_bytes):
        if num == mark:
            if orig_index is not None:
                raise MultipleMarkers(f'Multiple markers ({mark}) in input')
            orig_index = i
        else:
            numbers.append(num)
    if orig_index is None:
        raise MarkerNotFound(f'Marker {mark} not detected in input')

    # counts[c]: occurrences of c; before[i]: occurrences of numbers[i] in numbers[:i]
    counts = [0] * 256
    before = []
    for num in numbers:
        before.append(counts[num])
        counts[num] += 1

    # counts[c] becomes the number of bytes smaller than c
    total = 0
    for c in range(256):
        counts[c], total = total, total + counts[c]

    length = len(numbers)
    out_bytes = bytearray(length)
    i = orig_index
    for j in range(length - 1, -1, -1):
        num = numbers[i]
        out_bytes[j] = num
        i = before[i] + counts[num]
    return bytes(out_bytes)


if __name__ == '__main__':
    with open('test.dat', 'rb') as f:
        input_data = f.read()

    mark = next(c for c in range(256) if c not in input_data)
    enc = burrows_wheeler_transform(input_data, mark=mark)
    dec = burrows_wheeler_reverse_transform(enc, mark=mark)

    print(f'Marker byte: {mark}')
    print(f'Decoded data matches original: {input_data == dec}')
