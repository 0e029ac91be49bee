from __future__ import annotations
from typing import ClassVar, Tuple
from pydantic import BaseModel, Field

from ..codecs.boolean import BOOL
from ..codecs.num import U16
from ..codecs.text import STR
from ..cursor import read, read_with, write, write_with
from ..models.context import BE, Endian, StrCtx
from ..offset import Offset


class Header(BaseModel):
    """
    Example composite record, and the model for user-defined codecs:

      | name length (u16) | name (utf-8) | enabled (bool) |

    The class itself is the codec. Fields are read through nested cursor calls
    on a local Offset, so a name length that runs past the data comes back as
    Incomplete rather than BadOffset.
    """
    name: str = Field(..., max_length=0xFFFF)
    enabled: bool = False

    default_ctx: ClassVar[Endian] = BE

    @classmethod
    def try_read(cls, buf: memoryview, ctx: Endian = BE) -> Tuple["Header", int]:
        off = Offset()
        name_len = read_with(buf, off, U16, ctx)
        name = read_with(buf, off, STR, StrCtx.of_len(name_len))
        enabled = read(buf, off, BOOL)
        return cls(name=name, enabled=enabled), off.pos

    @classmethod
    def try_write(cls, value: "Header", buf: memoryview, ctx: Endian = BE) -> int:
        off = Offset()
        raw = value.name.encode("utf-8")
        write_with(buf, off, U16, len(raw), ctx)
        write_with(buf, off, STR, value.name, StrCtx.of_len(len(raw)))
        write(buf, off, BOOL, value.enabled)
        return off.pos
