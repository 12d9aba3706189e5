"""Byte-buffer operations on bytearray and bytes objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

_MAX_ALLOCATION = 2147483647


def _check_span(data: Buffer, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    if n > len(data):
        raise IndexError(f"length {n} exceeds {what} size {len(data)}")


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buffer`` in place."""
    _check_span(buffer, length)
    buffer[:length] = bytes(length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when the total exceeds the 32-bit signed limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _MAX_ALLOCATION:
        raise MemoryError(f"allocation of {total} bytes is too large")
    return bytearray(total)


def memchr(data: Buffer, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in the first ``n`` bytes."""
    _check_span(data, n)
    target = value & 0xFF
    for index, byte in enumerate(data[:n]):
        if byte == target:
            return index
    return None


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_span(first, n, "first buffer")
    _check_span(second, n, "second buffer")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_span(src, n, "source")
    _check_span(dest, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buffer``; overlapping regions are handled."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("length must not be negative")
    if max(dest_offset, src_offset) + n > len(buffer):
        raise IndexError("move runs past the end of the buffer")
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_span(buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer