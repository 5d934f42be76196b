"""Line-by-line reading from file descriptors with per-descriptor buffering."""

from __future__ import annotations

import os
from typing import Optional

BUFFER_SIZE = 50


class LineReader:
    """Reads lines from raw file descriptors, keeping unread data for each one."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytearray] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from ``fd``, newline included, or None at end.

        The last line is returned without a newline when the data does not
        end with one. A read error discards whatever was buffered for ``fd``
        and is raised as :class:`OSError`.
        """
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        stash = self._pending.pop(fd, bytearray())
        while b"\n" not in stash:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            stash += chunk
        if not stash:
            return None
        end = stash.find(b"\n")
        if end < 0:
            return bytes(stash)
        line = bytes(stash[: end + 1])
        self._pending[fd] = stash[end + 1 :]
        return line


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Read the next line from ``fd`` using a shared reader."""
    return _default_reader.read_line(fd)