"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(name: str, n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"{name}={n} exceeds buffer length {len(buffer)}")


def memset(buffer: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buffer`` with the low byte of ``value``."""
    _check_count("n", n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count("n", n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(
    buffer: WritableBuffer, dest_offset: int, src_offset: int, n: int
) -> WritableBuffer:
    """Move ``n`` bytes within ``buffer``; the regions may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if max(dest_offset, src_offset) + n > len(buffer):
        raise ValueError("move reaches past the end of the buffer")
    buffer[dest_offset : dest_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``c`` in ``data[:n]``."""
    _check_count("n", n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Difference of the first unequal bytes within ``n``, or 0 when equal."""
    _check_count("n", n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of ``count * size`` bytes; one byte when either is zero."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    return bytearray(count * size)