"""Writing characters, strings and numbers to a stream or file descriptor."""

from __future__ import annotations

import os
from typing import TextIO, Union

Stream = Union[TextIO, int]


def _write(stream: Stream, text: str) -> None:
    if isinstance(stream, int):
        data = text.encode()
        while data:
            written = os.write(stream, data)
            data = data[written:]
    else:
        stream.write(text)


def putchar_fd(c: str, stream: Stream) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _write(stream, c)


def putstr_fd(s: str, stream: Stream) -> None:
    """Write ``s`` as it is."""
    _write(stream, s)


def putendl_fd(s: str, stream: Stream) -> None:
    """Write ``s`` followed by a newline."""
    _write(stream, s + "\n")


def putnbr_fd(n: int, stream: Stream) -> None:
    """Write the decimal form of ``n``."""
    _write(stream, str(n))