import os

import pytest

from libftplus.output import put_char, put_endl, put_nbr, put_str


class _Pipe:
    def __init__(self):
        self._read_fd, self.fd = os.pipe()

    def read(self):
        if self.fd >= 0:
            os.close(self.fd)
            self.fd = -1
        chunks = []
        while True:
            chunk = os.read(self._read_fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def close(self):
        if self.fd >= 0:
            os.close(self.fd)
            self.fd = -1
        os.close(self._read_fd)


@pytest.fixture
def pipe():
    p = _Pipe()
    yield p
    p.close()


def test_put_char_string(pipe):
    put_char("z", pipe.fd)
    assert pipe.read() == b"z"


def test_put_char_int_writes_low_byte(pipe):
    put_char(ord("A"), pipe.fd)
    put_char(0x100 + ord("B"), pipe.fd)
    assert pipe.read() == b"AB"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", 1)


def test_put_str(pipe):
    put_str("hello world", pipe.fd)
    assert pipe.read() == b"hello world"


def test_put_str_none_writes_nothing(pipe):
    put_str(None, pipe.fd)
    assert pipe.read() == b""


def test_put_endl_appends_newline(pipe):
    put_endl("line", pipe.fd)
    assert pipe.read() == b"line\n"


def test_put_endl_none_writes_nothing(pipe):
    put_endl(None, pipe.fd)
    assert pipe.read() == b""


@pytest.mark.parametrize("n", [0, 42, -7, 2147483647, -2147483648])
def test_put_nbr_round_trip(pipe, n):
    put_nbr(n, pipe.fd)
    assert int(pipe.read()) == n


def test_put_nbr_int_min(pipe):
    put_nbr(-2147483648, pipe.fd)
    assert pipe.read() == b"-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2**31, 1)


def test_write_to_closed_fd_raises():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    with pytest.raises(OSError):
        put_str("x", write_fd)