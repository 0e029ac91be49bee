from __future__ import annotations
from typing import Tuple

from ..contracts import REQUIRED, Codec
from ..errors import BadInput, Incomplete, check_len
from ..models.context import BytesCtx, StrCtx


def _find_byte(buf: memoryview, byte: int, limit: int) -> int:
    """Index of `byte` within the first `limit` bytes of `buf`, or -1."""
    for i in range(min(limit, len(buf))):
        if buf[i] == byte:
            return i
    return -1


def _find_pattern(buf: memoryview, pattern: bytes, limit: int) -> int:
    """Index where `pattern` starts, fully inside the first `limit` bytes, or -1."""
    end = min(limit, len(buf))
    plen = len(pattern)
    for i in range(0, end - plen + 1):
        if buf[i:i + plen] == pattern:
            return i
    return -1


def _decode_utf8(raw: memoryview) -> str:
    try:
        return str(raw, "utf-8")
    except UnicodeDecodeError as err:
        raise BadInput(f"invalid utf-8: {err.reason}") from err


def _put(buf: memoryview, data: bytes) -> int:
    n = check_len(buf, len(data))
    buf[:n] = data
    return n


class StrCodec(Codec):
    """UTF-8 text framed by StrCtx. Decoded values are str copies."""
    name = "str"
    default_ctx = REQUIRED

    def try_read(self, buf: memoryview, ctx: StrCtx) -> Tuple[str, int]:
        if ctx.kind == "len":
            n = check_len(buf, ctx.length)
            return _decode_utf8(buf[:n]), n

        if ctx.kind == "delimiter":
            pos = _find_byte(buf, ctx.delimiter, len(buf))
            if pos < 0:
                raise Incomplete(f"delimiter 0x{ctx.delimiter:02x} not found")
            return _decode_utf8(buf[:pos]), pos + 1

        # delimiter_until
        pos = _find_byte(buf, ctx.delimiter, ctx.length)
        if pos >= 0:
            return _decode_utf8(buf[:pos]), pos + 1
        n = check_len(buf, ctx.length)
        return _decode_utf8(buf[:n]), n

    def try_write(self, value: str, buf: memoryview, ctx: StrCtx) -> int:
        data = value.encode("utf-8")

        if ctx.kind == "len":
            if len(data) != ctx.length:
                raise BadInput(f"string is {len(data)} bytes, context wants {ctx.length}")
            return _put(buf, data)

        if ctx.delimiter in data:
            raise BadInput(f"string contains delimiter 0x{ctx.delimiter:02x}")

        if ctx.kind == "delimiter":
            return _put(buf, data + bytes((ctx.delimiter,)))

        # delimiter_until
        if len(data) > ctx.length:
            raise BadInput(f"string is {len(data)} bytes, limit is {ctx.length}")
        if len(data) == ctx.length:
            return _put(buf, data)
        return _put(buf, data + bytes((ctx.delimiter,)))


class BytesCodec(Codec):
    """
    Raw byte runs framed by BytesCtx.

    Decoded values are memoryview slices of the source buffer, not copies;
    they go stale if the source buffer is mutated or released.
    """
    name = "bytes"
    default_ctx = REQUIRED

    def try_read(self, buf: memoryview, ctx: BytesCtx) -> Tuple[memoryview, int]:
        if ctx.kind == "len":
            n = check_len(buf, ctx.length)
            return buf[:n], n

        if not ctx.pattern:
            raise BadInput("pattern is empty")
        plen = len(ctx.pattern)
        check_len(buf, plen)

        if ctx.kind == "pattern":
            pos = _find_pattern(buf, ctx.pattern, len(buf))
            if pos < 0:
                raise Incomplete("pattern not found")
            return buf[:pos + plen], pos + plen

        # pattern_until
        pos = _find_pattern(buf, ctx.pattern, ctx.length)
        if pos >= 0:
            return buf[:pos + plen], pos + plen
        n = check_len(buf, ctx.length)
        return buf[:n], n

    def try_write(self, value: bytes, buf: memoryview, ctx: BytesCtx) -> int:
        data = bytes(value)
        if ctx.kind == "len" and len(data) != ctx.length:
            raise BadInput(f"value is {len(data)} bytes, context wants {ctx.length}")
        return _put(buf, data)


STR = StrCodec()
BYTES = BytesCodec()
