import pytest

from bytectx.codecs.boolean import BOOL
from bytectx.codecs.num import U16, U32
from bytectx.codecs.text import STR
from bytectx.cursor import ByteSlice, read, read_with, write, write_with
from bytectx.errors import BadInput, BadOffset, CodecContractError, Incomplete
from bytectx.models.context import BE, LE, StrCtx
from bytectx.offset import Offset


class NestedBadOffset:
    """Codec that leaks a BadOffset, as a nested cursor call would."""
    default_ctx = None

    def try_read(self, buf, ctx):
        raise BadOffset(len(buf))

    def try_write(self, value, buf, ctx):
        raise BadOffset(len(buf))


class Oversized:
    default_ctx = None

    def try_read(self, buf, ctx):
        return None, len(buf) + 1

    def try_write(self, value, buf, ctx):
        return len(buf) + 1


def test_offset_advances_by_consumed_size():
    data = bytes.fromhex("deadbeef0102")
    off = Offset()
    assert read_with(data, off, U32, BE) == 0xDEADBEEF
    assert off == 4
    assert read_with(data, off, U16, LE) == 0x0201
    assert off == 6


def test_offset_past_end_is_bad_offset():
    data = b"\x01\x00"
    for pos in (2, 3, 10):
        off = Offset(pos)
        with pytest.raises(BadOffset) as ei:
            read(data, off, BOOL)
        assert ei.value.offset == pos
        assert off == pos


def test_failed_read_leaves_offset_alone():
    data = b"\x01\x02\x03"
    off = Offset(1)
    with pytest.raises(Incomplete):
        read_with(data, off, U32, BE)
    assert off == 1
    with pytest.raises(BadInput):
        read(data, off, BOOL)
    assert off == 1


def test_nested_bad_offset_becomes_incomplete():
    off = Offset()
    with pytest.raises(Incomplete) as ei:
        read(b"\x00\x00", off, NestedBadOffset())
    assert isinstance(ei.value.__cause__, BadOffset)
    assert off == 0

    with pytest.raises(Incomplete):
        write(bytearray(2), off, NestedBadOffset(), None)
    assert off == 0


def test_length_prefix_longer_than_data_is_incomplete():
    # declared length 5, only 3 bytes follow
    data = b"\x00\x05abc"
    off = Offset()
    n = read_with(data, off, U16, BE)
    with pytest.raises(Incomplete):
        read_with(data, off, STR, StrCtx.of_len(n))
    assert off == 2


def test_oversized_report_is_contract_error():
    off = Offset()
    with pytest.raises(CodecContractError):
        read(b"\x00", off, Oversized())
    with pytest.raises(CodecContractError):
        write(bytearray(1), off, Oversized(), None)
    assert off == 0


def test_write_advances_and_fails_cleanly():
    buf = bytearray(5)
    off = Offset()
    write_with(buf, off, U32, 0x01020304, BE)
    assert off == 4
    with pytest.raises(Incomplete):
        write_with(buf, off, U16, 7, BE)
    assert off == 4
    assert buf == bytearray([1, 2, 3, 4, 0])


def test_write_into_read_only_buffer():
    with pytest.raises(TypeError):
        write(b"\x00", Offset(), BOOL, True)


def test_required_context_has_no_default():
    with pytest.raises(TypeError):
        read(b"abc", Offset(), STR)


def test_reads_from_memoryview_and_bytearray():
    raw = bytearray(b"\x00\x01\x01")
    off = Offset(1)
    assert read(memoryview(raw), off, BOOL) is True
    assert read(raw, off, BOOL) is True
    assert off == 3


def test_byte_slice_methods():
    buf = bytearray(3)
    s = ByteSlice(buf)
    off = Offset()
    s.write_with(off, U16, 0xABCD, BE)
    s.write(off, BOOL, True)
    assert len(s) == 3

    off = Offset()
    assert s.read_with(off, U16, BE) == 0xABCD
    assert s.read(off, BOOL) is True
    assert off == 3


def test_offset_copy_branches():
    data = b"\x01\x00\x01"
    off = Offset()
    read(data, off, BOOL)
    branch = off.copy()
    assert read(data, branch, BOOL) is False
    assert off == 1 and branch == 2
    off.seek(0)
    assert int(off) == 0


def test_negative_offset_rejected():
    with pytest.raises(ValueError):
        Offset(-1)
    with pytest.raises(ValueError):
        Offset().seek(-3)
