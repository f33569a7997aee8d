"""I/O channels over POSIX file descriptors."""

from __future__ import annotations

import contextlib
import os

from glibcore.iochannel import _WHENCE, ChannelError, IOChannel, SeekType, _translate


class UnixIOChannel(IOChannel):
    """An :class:`IOChannel` that reads and writes a raw file descriptor.

    The channel does not own the descriptor until ``close`` is called;
    dropping the last reference only releases it.
    """

    def __init__(self, fd: int) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        super().__init__(fd)
        self._fd = fd

    def fileno(self) -> int:
        """Return the file descriptor the channel was made for."""
        return self._fd

    def read(self, count: int) -> bytes:
        """Read up to ``count`` bytes; an empty result means end of file."""
        if count < 0:
            raise ValueError("count must not be negative")
        fd = self._raw()
        try:
            return os.read(fd, count)
        except OSError as exc:
            raise _translate(exc) from exc

    def write(self, data: bytes) -> int:
        """Write ``data``; return how many bytes were written."""
        fd = self._raw()
        try:
            return os.write(fd, data)
        except OSError as exc:
            raise _translate(exc) from exc

    def seek(self, offset: int, whence: SeekType = SeekType.SET) -> int:
        """Move the descriptor's position; return the new position."""
        try:
            whence = SeekType(whence)
        except ValueError as exc:
            raise ChannelError(ChannelError.Kind.UNKNOWN, "unknown seek type") from exc
        fd = self._raw()
        try:
            return os.lseek(fd, offset, _WHENCE[whence])
        except OSError as exc:
            raise _translate(exc, again=False) from exc

    def close(self) -> None:
        """Close the file descriptor."""
        fd = self._raw()
        with contextlib.suppress(OSError):
            os.close(fd)

    def __repr__(self) -> str:
        return f"UnixIOChannel(fd={self._fd})"