from __future__ import annotations


class ByteError(ValueError):
    """
    Base class for everything a codec or the cursor layer can report.

    - Incomplete: not enough bytes; retry once more data arrives.
    - BadOffset: the caller started a read/write at or past the end of the buffer.
      Only the top-level cursor calls raise it; a nested one becomes Incomplete.
    - BadInput: the bytes are all there but do not make a valid value.
    """

    def _key(self) -> tuple:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._key()))


class Incomplete(ByteError):
    def __init__(self, detail: str = "not enough bytes"):
        super().__init__(detail)
        self.detail = detail


class BadOffset(ByteError):
    def __init__(self, offset: int):
        super().__init__(f"bad offset {offset}")
        self.offset = offset

    def _key(self) -> tuple:
        return (self.offset,)


class BadInput(ByteError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def _key(self) -> tuple:
        return (self.reason,)


class CodecContractError(RuntimeError):
    """A codec reported a size outside the slice it was given."""


def check_len(buf, length: int) -> int:
    """Return `length` if `buf` holds at least that many bytes, else raise Incomplete."""
    if len(buf) < length:
        raise Incomplete(f"need {length} bytes, have {len(buf)}")
    return length
