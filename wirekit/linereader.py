"""Line-at-a-time reading from raw file descriptors."""

from __future__ import annotations

import os

BUFFER_SIZE = 4096


class LineReader:
    """Reads newline-terminated lines from file descriptors.

    Data read past the end of a line is kept per descriptor for the next call.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytearray] = {}

    def next_line(self, fd: int) -> bytes | None:
        """Return the next line of ``fd`` with its newline, or ``None`` at end or on error.

        The last line of the input is returned even without a trailing newline.
        """
        if fd < 0:
            return None
        pending = self._pending.setdefault(fd, bytearray())
        while True:
            try:
                chunk = os.read(fd, self.buffer_size)
            except OSError:
                self.forget(fd)
                return None
            pending += chunk
            newline = pending.find(b"\n")
            if newline != -1:
                line = bytes(pending[: newline + 1])
                del pending[: newline + 1]
                return line
            if not chunk:
                if pending:
                    line = bytes(pending)
                    pending.clear()
                    return line
                self.forget(fd)
                return None

    def forget(self, fd: int) -> None:
        """Discard whatever is buffered for ``fd``."""
        self._pending.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> bytes | None:
    """Read the next line of ``fd`` using a shared reader."""
    return _default_reader.next_line(fd)