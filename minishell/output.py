"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write a single character to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if s is not None:
        _write_all(fd, s.encode())


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is not None:
        _write_all(fd, (s + "\n").encode())


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    _write_all(fd, str(n).encode())