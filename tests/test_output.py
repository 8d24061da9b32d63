import os

import pytest

from sigtalk.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


class _Pipe:
    """An OS pipe whose write end is handed to the functions under test."""

    def __init__(self):
        self._read_fd, self.fd = os.pipe()
        self._write_open = True
        self._read_open = True

    def read(self):
        self._close_write()
        with os.fdopen(self._read_fd, "rb") as reader:
            self._read_open = False
            return reader.read()

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
    yield p
    p.close()


def test_putchar_writes_one_char(pipe):
    putchar_fd("f", pipe.fd)
    assert pipe.read() == b"f"


def test_putchar_int_is_one_byte(pipe):
    putchar_fd(ord("\n"), pipe.fd)
    assert pipe.read() == b"\n"


def test_putchar_rejects_long_string(pipe):
    with pytest.raises(ValueError):
        putchar_fd("ab", pipe.fd)


def test_putstr_writes_text(pipe):
    putstr_fd("PID server: ", pipe.fd)
    assert pipe.read() == b"PID server: "


def test_putstr_none_writes_nothing(pipe):
    putstr_fd(None, pipe.fd)
    assert pipe.read() == b""


def test_putstr_utf8(pipe):
    text = "✅ done"
    putstr_fd(text, pipe.fd)
    assert pipe.read().decode("utf-8") == text


def test_putendl_adds_newline(pipe):
    putendl_fd("ecold 42", pipe.fd)
    assert pipe.read() == b"ecold 42\n"


def test_putendl_none_writes_nothing(pipe):
    putendl_fd(None, pipe.fd)
    assert pipe.read() == b""


@pytest.mark.parametrize("n", [-777, 88, 9, 2, 0, 2147483647])
def test_putnbr_round_trip(pipe, n):
    putnbr_fd(n, pipe.fd)
    assert int(pipe.read()) == n


def test_putnbr_int_min(pipe):
    putnbr_fd(-2147483648, pipe.fd)
    assert pipe.read() == b"-2147483648"


def test_putnbr_rejects_non_int():
    with pytest.raises(TypeError):
        putnbr_fd("12", 1)


@pytest.mark.parametrize(
    "func,arg",
    [(putchar_fd, "x"), (putstr_fd, "x"), (putendl_fd, "x"), (putnbr_fd, 5)],
)
def test_negative_fd_does_nothing(func, arg):
    assert func(arg, -1) is None
    assert func(arg, -2) is None