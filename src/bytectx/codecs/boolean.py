from __future__ import annotations
from typing import Any, Tuple

from ..contracts import NO_CTX, Codec
from ..errors import BadInput, check_len


class BoolCodec(Codec):
    """
    One byte: 0x01 is True, 0x00 is False, anything else is BadInput.

    New primitive codecs should follow the same shape: check_len first,
    branch on content, BadInput only for bytes that are present but invalid.
    """
    name = "bool"
    default_ctx = NO_CTX

    def try_read(self, buf: memoryview, ctx: Any = NO_CTX) -> Tuple[bool, int]:
        check_len(buf, 1)
        b = buf[0]
        if b == 1:
            return True, 1
        if b == 0:
            return False, 1
        raise BadInput("invalid bool encoding")

    def try_write(self, value: bool, buf: memoryview, ctx: Any = NO_CTX) -> int:
        check_len(buf, 1)
        buf[0] = 1 if value else 0
        return 1


BOOL = BoolCodec()
