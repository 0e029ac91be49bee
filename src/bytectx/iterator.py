from __future__ import annotations
import copy
from typing import Any, Iterator

from .errors import ByteError, CodecContractError
from .offset import Offset


class ReadIter(Iterator[Any]):
    """
    Forward-only repeated reads of one codec, sharing the caller's Offset.

    Stops at the first failed decode (end of data included) and drops the
    error; there is no way to ask why it stopped. Once stopped it stays
    stopped. Building a new ReadIter on the same Offset resumes from wherever
    this one left it.
    """
    __slots__ = ("_buf", "_offset", "_codec", "_ctx", "_done")

    def __init__(self, buf: memoryview, offset: Offset, codec: Any, ctx: Any):
        self._buf = buf
        self._offset = offset
        self._codec = codec
        self._ctx = ctx
        self._done = False

    def __iter__(self) -> "ReadIter":
        return self

    def __next__(self) -> Any:
        if self._done:
            raise StopIteration
        start = self._offset.pos
        rest = self._buf[start:]
        try:
            value, size = self._codec.try_read(rest, copy.copy(self._ctx))
        except ByteError:
            self._done = True
            raise StopIteration from None
        if size > len(rest):
            raise CodecContractError(
                f"{self._codec!r} reported size {size} for a slice of {len(rest)} bytes"
            )
        # zero-size decodes would never make progress
        if size <= 0:
            self._done = True
            raise StopIteration
        self._offset.pos = start + size
        return value
