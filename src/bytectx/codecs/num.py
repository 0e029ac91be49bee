from __future__ import annotations
import struct
from typing import Dict, Tuple, Union

from ..contracts import Codec
from ..errors import BadInput, check_len
from ..models.context import BE, LE, NATIVE, Endian

Number = Union[int, float]


class NumCodec(Codec):
    """Fixed-width integer/float codec; the context picks the byte order."""
    default_ctx = NATIVE

    def __init__(self, name: str, fmt: str):
        self.name = name
        self._structs: Dict[Endian, struct.Struct] = {
            BE: struct.Struct(">" + fmt),
            LE: struct.Struct("<" + fmt),
        }
        self.size = self._structs[BE].size

    def _struct(self, ctx: Endian) -> struct.Struct:
        return self._structs[Endian(ctx)]

    def try_read(self, buf: memoryview, ctx: Endian = NATIVE) -> Tuple[Number, int]:
        st = self._struct(ctx)
        check_len(buf, st.size)
        return st.unpack_from(buf, 0)[0], st.size

    def try_write(self, value: Number, buf: memoryview, ctx: Endian = NATIVE) -> int:
        st = self._struct(ctx)
        check_len(buf, st.size)
        try:
            st.pack_into(buf, 0, value)
        except (struct.error, OverflowError) as err:
            raise BadInput(f"value out of range for {self.name}: {value!r}") from err
        return st.size


U8  = NumCodec("u8", "B")
I8  = NumCodec("i8", "b")
U16 = NumCodec("u16", "H")
I16 = NumCodec("i16", "h")
U32 = NumCodec("u32", "I")
I32 = NumCodec("i32", "i")
U64 = NumCodec("u64", "Q")
I64 = NumCodec("i64", "q")
F32 = NumCodec("f32", "f")
F64 = NumCodec("f64", "d")

BY_NAME: Dict[str, NumCodec] = {c.name: c for c in (U8, I8, U16, I16, U32, I32, U64, I64, F32, F64)}
