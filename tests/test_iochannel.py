import errno
import io

import pytest

from glibcore.iochannel import ChannelError, IOChannel, SeekType


class _Failing:
    def __init__(self, exc):
        self.exc = exc

    def read(self, count):
        raise self.exc

    def write(self, data):
        raise self.exc

    def seek(self, offset, whence):
        raise self.exc

    def close(self):
        raise self.exc


class _NonBlocking:
    def read(self, count):
        return None

    def write(self, data):
        return None


def test_read_returns_requested_bytes():
    channel = IOChannel(io.BytesIO(b"hello world"))
    assert channel.read(5) == b"hello"
    assert channel.read(100) == b" world"
    assert channel.read(10) == b""


def test_write_then_read_back():
    stream = io.BytesIO()
    channel = IOChannel(stream)
    assert channel.write(b"abc") == 3
    channel.seek(0, SeekType.SET)
    assert channel.read(3) == b"abc"


def test_seek_kinds():
    channel = IOChannel(io.BytesIO(b"0123456789"))
    channel.seek(2, SeekType.SET)
    channel.seek(3, SeekType.CUR)
    assert channel.read(1) == b"5"
    channel.seek(-2, SeekType.END)
    assert channel.read(2) == b"89"


def test_unknown_seek_type():
    channel = IOChannel(io.BytesIO(b"x"))
    with pytest.raises(ChannelError) as info:
        channel.seek(0, 7)
    assert info.value.kind is ChannelError.Kind.UNKNOWN


def test_negative_seek_is_inval():
    channel = IOChannel(io.BytesIO(b"x"))
    with pytest.raises(ChannelError) as info:
        channel.seek(-1, SeekType.SET)
    assert info.value.kind is ChannelError.Kind.INVAL


def test_blocking_errors_are_again():
    channel = IOChannel(_Failing(BlockingIOError(errno.EAGAIN, "busy")))
    with pytest.raises(ChannelError) as info:
        channel.read(1)
    assert info.value.kind is ChannelError.Kind.AGAIN


def test_seek_never_reports_again():
    channel = IOChannel(_Failing(BlockingIOError(errno.EAGAIN, "busy")))
    with pytest.raises(ChannelError) as info:
        channel.seek(0)
    assert info.value.kind is ChannelError.Kind.UNKNOWN


def test_einval_and_unknown_errors():
    inval = IOChannel(_Failing(OSError(errno.EINVAL, "bad")))
    with pytest.raises(ChannelError) as info:
        inval.write(b"x")
    assert info.value.kind is ChannelError.Kind.INVAL

    other = IOChannel(_Failing(OSError(errno.EIO, "io")))
    with pytest.raises(ChannelError) as info:
        other.read(1)
    assert info.value.kind is ChannelError.Kind.UNKNOWN


def test_nonblocking_none_results_are_again():
    channel = IOChannel(_NonBlocking())
    with pytest.raises(ChannelError) as info:
        channel.read(4)
    assert info.value.kind is ChannelError.Kind.AGAIN
    with pytest.raises(ChannelError) as info:
        channel.write(b"data")
    assert info.value.kind is ChannelError.Kind.AGAIN


def test_reference_counting_frees_channel():
    stream = io.BytesIO(b"data")
    channel = IOChannel(stream)
    assert channel.ref_count == 1
    channel.ref()
    assert channel.ref_count == 2
    channel.unref()
    assert channel.read(2) == b"da"
    channel.unref()
    assert channel.ref_count == 0
    assert stream.closed is False
    with pytest.raises(ValueError):
        channel.read(1)
    with pytest.raises(ValueError):
        channel.unref()


def test_close_closes_stream_and_later_reads_fail():
    stream = io.BytesIO(b"data")
    channel = IOChannel(stream)
    channel.close()
    assert stream.closed is True
    with pytest.raises(ChannelError) as info:
        channel.read(1)
    assert info.value.kind is ChannelError.Kind.INVAL


def test_close_ignores_os_errors_and_context_manager_closes():
    IOChannel(_Failing(OSError(errno.EIO, "io"))).close()
    stream = io.BytesIO()
    with IOChannel(stream) as channel:
        assert channel.write(b"ab") == 2
    assert stream.closed is True


def test_negative_read_count():
    with pytest.raises(ValueError):
        IOChannel(io.BytesIO()).read(-1)