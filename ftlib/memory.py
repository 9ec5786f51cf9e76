"""Byte-buffer helpers over bytearray and other byte sequences."""

from collections.abc import Sequence


def _check_count(count: int, *buffers: Sequence[int]) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError("count exceeds buffer length")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first *count* bytes of *buffer* with the low byte of *value*."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first *count* bytes of *buffer*."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of *count* items of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray | None, src: Sequence[int] | None, count: int) -> bytearray | None:
    """Copy *count* bytes from *src* to the start of *dst* and return *dst*."""
    if dst is None and src is None:
        return dst
    if dst is None or src is None:
        raise ValueError("both buffers are required")
    _check_count(count, dst, src)
    dst[:count] = bytes(src[:count])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, count: int) -> bytearray:
    """Copy *count* bytes inside *buffer* from offset *src* to offset *dst*.

    The regions may overlap.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if count < 0 or max(dst, src) + count > len(buffer):
        raise ValueError("region exceeds buffer length")
    if count:
        buffer[dst:dst + count] = bytes(buffer[src:src + count])
    return buffer


def memccpy(dst: bytearray, src: Sequence[int], stop: int, count: int) -> int | None:
    """Copy bytes from *src* to *dst* until *stop* has been copied.

    At most *count* bytes are copied. Returns the index in *dst* just past
    the copied stop byte, or None if it was not among them.
    """
    _check_count(count, dst, src)
    stop &= 0xFF
    for index, byte in enumerate(src[:count]):
        dst[index] = byte
        if byte == stop:
            return index + 1
    return None


def memchr(data: Sequence[int], value: int, count: int) -> int | None:
    """Return the index of the first *value* in the first *count* bytes, or None."""
    _check_count(count, data)
    for index, byte in enumerate(data[:count]):
        if byte == value:
            return index
    return None


def memcmp(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Compare the first *count* bytes; return the first difference or 0."""
    _check_count(count, first, second)
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0