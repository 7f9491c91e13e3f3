"""Byte-buffer helpers working on bytes-like objects and bytearrays."""

from __future__ import annotations

from typing import Optional

_UINT32_MAX = 0xFFFFFFFF


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero, in place."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the product would not fit in 32 bits.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > _UINT32_MAX // size:
        raise OverflowError(f"allocation of {count} x {size} bytes is too large")
    return bytearray(count * size)


def memchr(buf: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: bytes, s2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values.

    Returns the difference of the first differing pair, or 0.
    """
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly. Returns ``buf``.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0 or dst + n > len(buf) or src + n > len(buf):
        raise ValueError(f"cannot move {n} bytes within a buffer of {len(buf)}")
    if dst != src:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (as unsigned char); return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf