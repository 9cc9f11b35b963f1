"""Byte-buffer helpers: fill, zero, allocate, search, compare and copy."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buf to the low byte of value; return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf; return buf."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError("requested size overflows")
    return bytearray(total)


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c in the first n bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing bytes within n, or 0 if equal."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy n bytes of src to the start of dst; return dst."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("both dst and src must be buffers")
    _check_count(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move n bytes within buf from offset src to offset dst, overlap allowed."""
    if dst < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if dst + n > len(buf) or src + n > len(buf):
        raise IndexError("move runs past the end of the buffer")
    if dst != src:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf