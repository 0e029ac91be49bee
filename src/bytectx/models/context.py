from __future__ import annotations
import sys
from enum import Enum
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Common delimiters for StrCtx
NULL = 0x00
TAB = 0x09
RET = 0x0D
SPACE = 0x20


class Endian(str, Enum):
    BIG = "big"
    LITTLE = "little"


BE = Endian.BIG
LE = Endian.LITTLE
NATIVE = Endian(sys.byteorder)


class StrCtx(BaseModel):
    """
    How a string is framed on the wire:
      - len: exactly `length` bytes
      - delimiter: up to and including `delimiter` (not part of the value)
      - delimiter_until: like delimiter, but at most `length` bytes are searched;
        with no delimiter in range the value is exactly `length` bytes
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["len", "delimiter", "delimiter_until"]
    length: Optional[int] = Field(default=None, ge=0)
    delimiter: Optional[int] = Field(default=None, ge=0, le=255)

    @model_validator(mode="after")
    def _check_fields(self) -> "StrCtx":
        if self.kind in ("len", "delimiter_until") and self.length is None:
            raise ValueError(f"StrCtx kind={self.kind!r} needs a length")
        if self.kind in ("delimiter", "delimiter_until") and self.delimiter is None:
            raise ValueError(f"StrCtx kind={self.kind!r} needs a delimiter")
        return self

    @classmethod
    def of_len(cls, length: int) -> "StrCtx":
        return cls(kind="len", length=length)

    @classmethod
    def delimited(cls, delimiter: int) -> "StrCtx":
        return cls(kind="delimiter", delimiter=delimiter)

    @classmethod
    def delimited_until(cls, delimiter: int, length: int) -> "StrCtx":
        return cls(kind="delimiter_until", delimiter=delimiter, length=length)


class BytesCtx(BaseModel):
    """Framing for raw byte runs; `pattern` is included in the decoded run."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["len", "pattern", "pattern_until"]
    length: Optional[int] = Field(default=None, ge=0)
    pattern: Optional[bytes] = None

    @model_validator(mode="after")
    def _check_fields(self) -> "BytesCtx":
        if self.kind in ("len", "pattern_until") and self.length is None:
            raise ValueError(f"BytesCtx kind={self.kind!r} needs a length")
        if self.kind in ("pattern", "pattern_until") and self.pattern is None:
            raise ValueError(f"BytesCtx kind={self.kind!r} needs a pattern")
        return self

    @classmethod
    def of_len(cls, length: int) -> "BytesCtx":
        return cls(kind="len", length=length)

    @classmethod
    def matching(cls, pattern: bytes) -> "BytesCtx":
        return cls(kind="pattern", pattern=pattern)

    @classmethod
    def matching_until(cls, pattern: bytes, length: int) -> "BytesCtx":
        return cls(kind="pattern_until", pattern=pattern, length=length)
