import pytest

from bytectx.errors import BadInput, BadOffset, ByteError, Incomplete, check_len


def test_check_len_boundary():
    buf = bytes(4)
    for n in range(5):
        assert check_len(buf, n) == n
    with pytest.raises(Incomplete):
        check_len(buf, 5)
    with pytest.raises(Incomplete):
        check_len(memoryview(b""), 1)


def test_errors_compare_by_kind_and_payload():
    assert Incomplete() == Incomplete()
    assert BadOffset(3) == BadOffset(3)
    assert BadOffset(3) != BadOffset(4)
    assert BadInput("x") == BadInput("x")
    assert Incomplete() != BadOffset(0)


def test_errors_are_value_errors():
    for err in (Incomplete(), BadOffset(0), BadInput("bad")):
        assert isinstance(err, ByteError)
        assert isinstance(err, ValueError)
    assert BadOffset(7).offset == 7
    assert BadInput("nope").reason == "nope"
