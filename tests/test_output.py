import os

import pytest

from minishell.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


class _Pipe:
    """A pipe whose write end is handed to the code under test."""

    def __init__(self):
        self._read_fd, self.fd = os.pipe()
        self._write_open = True
        self._read_open = True

    def read(self):
        self._close_write()
        chunks = []
        while True:
            chunk = os.read(self._read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def _close_write(self):
        if self._write_open:
            os.close(self.fd)
            self._write_open = False

    def close(self):
        self._close_write()
        if self._read_open:
            os.close(self._read_fd)
            self._read_open = False


@pytest.fixture
def pipe():
    p = _Pipe()
    try:
        yield p
    finally:
        p.close()


def test_putchar_fd(pipe):
    putchar_fd("x", pipe.fd)
    assert pipe.read() == b"x"


def test_putchar_fd_rejects_strings(pipe):
    with pytest.raises(ValueError):
        putchar_fd("xy", pipe.fd)


def test_putstr_fd(pipe):
    putstr_fd("minishell$ ", pipe.fd)
    assert pipe.read() == b"minishell$ "


def test_putstr_fd_none_writes_nothing(pipe):
    putstr_fd(None, pipe.fd)
    assert pipe.read() == b""


def test_putendl_fd_appends_newline(pipe):
    putendl_fd("hello", pipe.fd)
    assert pipe.read() == b"hello\n"


def test_putendl_fd_none_writes_nothing(pipe):
    putendl_fd(None, pipe.fd)
    assert pipe.read() == b""


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647])
def test_putnbr_fd_round_trip(pipe, n):
    putnbr_fd(n, pipe.fd)
    assert int(pipe.read()) == n


def test_putnbr_fd_int_min(pipe):
    putnbr_fd(-2147483648, pipe.fd)
    assert pipe.read() == b"-2147483648"


def test_putstr_fd_non_ascii_round_trip(pipe):
    text = "caf\u00e9"
    putstr_fd(text, pipe.fd)
    assert pipe.read().decode() == text