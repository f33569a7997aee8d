"""A reference-counted I/O channel over a binary stream."""

from __future__ import annotations

import contextlib
import enum
import errno
import os
from typing import Any


class SeekType(enum.IntEnum):
    """Where a seek offset is measured from."""

    SET = 0
    CUR = 1
    END = 2


_WHENCE = {
    SeekType.SET: os.SEEK_SET,
    SeekType.CUR: os.SEEK_CUR,
    SeekType.END: os.SEEK_END,
}


class ChannelError(Exception):
    """An I/O channel operation failed; ``kind`` tells how."""

    class Kind(enum.Enum):
        AGAIN = "again"
        INVAL = "inval"
        UNKNOWN = "unknown"

    def __init__(self, kind: "ChannelError.Kind", message: str = "") -> None:
        super().__init__(message or kind.value)
        self.kind = kind


def _translate(exc: Exception, *, again: bool = True) -> ChannelError:
    code = getattr(exc, "errno", None)
    if again and (isinstance(exc, BlockingIOError) or code == errno.EAGAIN):
        kind = ChannelError.Kind.AGAIN
    elif code == errno.EINVAL or (isinstance(exc, ValueError) and not isinstance(exc, OSError)):
        kind = ChannelError.Kind.INVAL
    else:
        kind = ChannelError.Kind.UNKNOWN
    return ChannelError(kind, str(exc))


class IOChannel:
    """Reads, writes and seeks a binary stream, sharing it by reference count.

    The channel starts with one reference; when the last is dropped the
    stream is released (but not closed) and the channel can no longer be used.
    """

    def __init__(self, stream: Any) -> None:
        self._stream = stream
        self.channel_flags = 0
        self._ref_count = 1

    @property
    def ref_count(self) -> int:
        return self._ref_count

    def _raw(self) -> Any:
        if self._stream is None:
            raise ValueError("channel has been freed")
        return self._stream

    def _free(self) -> None:
        self._stream = None

    def ref(self) -> "IOChannel":
        """Take another reference."""
        self._raw()
        self._ref_count += 1
        return self

    def unref(self) -> None:
        """Drop a reference; the channel is freed when none remain."""
        if self._ref_count <= 0:
            raise ValueError("channel has been freed")
        self._ref_count -= 1
        if self._ref_count == 0:
            self._free()

    def read(self, count: int) -> bytes:
        """Read up to ``count`` bytes; an empty result means end of file."""
        if count < 0:
            raise ValueError("count must not be negative")
        stream = self._raw()
        try:
            data = stream.read(count)
        except (OSError, ValueError) as exc:
            raise _translate(exc) from exc
        if data is None:
            raise ChannelError(ChannelError.Kind.AGAIN, "no data available")
        return bytes(data)

    def write(self, data: bytes) -> int:
        """Write ``data``; return how many bytes were written."""
        stream = self._raw()
        try:
            written = stream.write(data)
        except (OSError, ValueError) as exc:
            raise _translate(exc) from exc
        if written is None:
            raise ChannelError(ChannelError.Kind.AGAIN, "write would block")
        return written

    def seek(self, offset: int, whence: SeekType = SeekType.SET) -> int:
        """Move the stream position; return the new position."""
        try:
            whence = SeekType(whence)
        except ValueError as exc:
            raise ChannelError(ChannelError.Kind.UNKNOWN, "unknown seek type") from exc
        stream = self._raw()
        try:
            return stream.seek(offset, _WHENCE[whence])
        except (OSError, ValueError) as exc:
            raise _translate(exc, again=False) from exc

    def close(self) -> None:
        """Close the underlying stream."""
        with contextlib.suppress(OSError):
            self._raw().close()

    def __enter__(self) -> "IOChannel":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()