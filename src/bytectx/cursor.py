from __future__ import annotations
from typing import Any

from .contracts import REQUIRED, resolve_default
from .errors import BadOffset, CodecContractError, Incomplete
from .iterator import ReadIter
from .offset import Offset


def _view(buf) -> memoryview:
    mv = buf if isinstance(buf, memoryview) else memoryview(buf)
    if mv.ndim != 1 or mv.itemsize != 1:
        mv = mv.cast("B")
    return mv


def _writable_view(buf) -> memoryview:
    mv = _view(buf)
    if mv.readonly:
        raise TypeError(f"cannot write into read-only buffer of type {type(buf).__name__}")
    return mv


def _checked_size(codec: Any, size: int, available: int) -> int:
    if not (0 <= size <= available):
        raise CodecContractError(
            f"{codec!r} reported size {size} for a slice of {available} bytes"
        )
    return size


# -----------------------------
# Read
# -----------------------------

def read_with(buf, offset: Offset, codec: Any, ctx: Any) -> Any:
    """
    Decode one value with `codec` at `offset` and advance the offset past it.

    Raises BadOffset if the offset is already at or past the end of `buf`.
    A BadOffset raised from inside the codec (a nested cursor call running off
    its slice) is re-raised as Incomplete. On any failure `offset` is unchanged.
    """
    view = _view(buf)
    start = offset.pos
    if start >= len(view):
        raise BadOffset(start)

    rest = view[start:]
    try:
        value, size = codec.try_read(rest, ctx)
    except BadOffset as err:
        raise Incomplete(f"nested read ran out of data ({err})") from err

    offset.pos = start + _checked_size(codec, size, len(rest))
    return value


def read(buf, offset: Offset, codec: Any) -> Any:
    return read_with(buf, offset, codec, resolve_default(codec))


def read_iter(buf, offset: Offset, codec: Any, ctx: Any = REQUIRED) -> ReadIter:
    """Lazy repeated reads sharing `offset`. Omitting `ctx` uses the codec's default."""
    if ctx is REQUIRED:
        ctx = resolve_default(codec)
    return ReadIter(_view(buf), offset, codec, ctx)


# -----------------------------
# Write
# -----------------------------

def write_with(buf, offset: Offset, codec: Any, value: Any, ctx: Any) -> None:
    """Encode `value` at `offset` and advance the offset; same error rules as read_with."""
    view = _writable_view(buf)
    start = offset.pos
    if start >= len(view):
        raise BadOffset(start)

    rest = view[start:]
    try:
        size = codec.try_write(value, rest, ctx)
    except BadOffset as err:
        raise Incomplete(f"nested write ran out of space ({err})") from err

    offset.pos = start + _checked_size(codec, size, len(rest))


def write(buf, offset: Offset, codec: Any, value: Any) -> None:
    write_with(buf, offset, codec, value, resolve_default(codec))


class ByteSlice:
    """Binds a buffer so the cursor operations read as methods."""
    __slots__ = ("buf",)

    def __init__(self, buf):
        self.buf = _view(buf)

    def __len__(self) -> int: return len(self.buf)

    def read(self, offset: Offset, codec: Any) -> Any:
        return read(self.buf, offset, codec)

    def read_with(self, offset: Offset, codec: Any, ctx: Any) -> Any:
        return read_with(self.buf, offset, codec, ctx)

    def read_iter(self, offset: Offset, codec: Any, ctx: Any = REQUIRED) -> ReadIter:
        return read_iter(self.buf, offset, codec, ctx)

    def write(self, offset: Offset, codec: Any, value: Any) -> None:
        write(self.buf, offset, codec, value)

    def write_with(self, offset: Offset, codec: Any, value: Any, ctx: Any) -> None:
        write_with(self.buf, offset, codec, value, ctx)
