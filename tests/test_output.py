import io
import os

import pytest

from wirekit.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def test_putchar_writes_one_character():
    buf = io.StringIO()
    putchar_fd("z", buf)
    putchar_fd("!", buf)
    assert buf.getvalue() == "z!"


def test_putchar_rejects_longer_text():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putstr_writes_text_unchanged():
    buf = io.StringIO()
    putstr_fd("some text", buf)
    assert buf.getvalue() == "some text"


def test_putendl_appends_newline():
    buf = io.StringIO()
    putendl_fd("line", buf)
    assert buf.getvalue() == "line\n"


def test_putendl_empty_is_just_newline():
    buf = io.StringIO()
    putendl_fd("", buf)
    assert buf.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, 2147483647, -2147483648])
def test_putnbr_round_trip(n):
    buf = io.StringIO()
    putnbr_fd(n, buf)
    assert int(buf.getvalue()) == n


def test_putnbr_int_min_text():
    buf = io.StringIO()
    putnbr_fd(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_putnbr_zero_text():
    buf = io.StringIO()
    putnbr_fd(0, buf)
    assert buf.getvalue() == "0"


def test_writes_to_raw_file_descriptor():
    read_end, write_end = os.pipe()
    try:
        putstr_fd("ab", write_end)
        putchar_fd("c", write_end)
        putnbr_fd(-5, write_end)
        putendl_fd("", write_end)
    finally:
        os.close(write_end)
    with os.fdopen(read_end, "rb") as reader:
        assert reader.read() == b"abc-5\n"