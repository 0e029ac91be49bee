from bytectx.codecs.boolean import BOOL
from bytectx.codecs.num import U16
from bytectx.codecs.text import STR
from bytectx.cursor import ByteSlice, read, read_iter
from bytectx.models.context import BE, NULL, StrCtx
from bytectx.offset import Offset


def test_iterates_all_bools():
    off = Offset()
    assert list(read_iter(bytes([1, 0, 1, 0, 1]), off, BOOL)) == [True, False, True, False, True]
    assert off == 5


def test_stops_at_invalid_trailing_bytes():
    data = bytes([1, 0, 1, 7, 7])
    off = Offset()
    assert list(read_iter(data, off, BOOL)) == [True, False, True]
    assert off == 3


def test_stops_on_partial_trailing_value():
    data = bytes.fromhex("0001000200")
    off = Offset()
    assert list(read_iter(data, off, U16, BE)) == [1, 2]
    assert off == 4


def test_delimited_strings_like_a_table():
    data = b"hello\0world\0dead\0beef\0more"
    off = Offset()
    it = ByteSlice(data).read_iter(off, STR, StrCtx.delimited(NULL))
    assert next(it) == "hello"
    assert next(it) == "world"
    assert list(it) == ["dead", "beef"]
    assert off == 22


def test_stays_exhausted():
    data = bytes([1, 9, 0])
    off = Offset()
    it = read_iter(data, off, BOOL)
    assert list(it) == [True]
    # offset moved past the bad byte by hand; a spent iterator still yields nothing
    off.seek(2)
    assert list(it) == []
    assert off == 2


def test_not_restartable_but_resumable():
    data = bytes([1, 0, 1, 1])
    off = Offset()
    it = read_iter(data, off, BOOL)
    assert next(it) is True
    assert next(it) is False
    # a fresh iterator over the same offset picks up where the old one stopped
    assert list(read_iter(data, off, BOOL)) == [True, True]
    assert off == 4


def test_lazy_until_consumed():
    data = bytes([1, 1])
    off = Offset()
    it = read_iter(data, off, BOOL)
    assert off == 0
    assert read(data, off, BOOL) is True
    assert list(it) == [True]
    assert off == 2


def test_empty_buffer_yields_nothing():
    off = Offset()
    assert list(read_iter(b"", off, BOOL)) == []
    assert off == 0
