from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Protocol, Tuple, runtime_checkable

# "No context" value for codecs that need none.
NO_CTX = None


class _Required:
    __slots__ = ()
    def __repr__(self) -> str: return "REQUIRED"


# Marks a codec whose context has no zero-argument default.
REQUIRED: Any = _Required()


@runtime_checkable
class Readable(Protocol):
    def try_read(self, buf: memoryview, ctx: Any) -> Tuple[Any, int]: ...


@runtime_checkable
class Writable(Protocol):
    def try_write(self, value: Any, buf: memoryview, ctx: Any) -> int: ...


class Codec(ABC):
    """
    Decode/encode a single value at the head of a buffer slice.

    try_read gets the unread remainder and returns (value, consumed).
    try_write gets the unwritten remainder and returns written.
    Both call check_len before indexing, never report more than len(buf),
    and raise only Incomplete or BadInput.
    """
    name = "codec"
    default_ctx: Any = NO_CTX

    @abstractmethod
    def try_read(self, buf: memoryview, ctx: Any) -> Tuple[Any, int]: ...

    @abstractmethod
    def try_write(self, value: Any, buf: memoryview, ctx: Any) -> int: ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


def resolve_default(codec: Any) -> Any:
    ctx = getattr(codec, "default_ctx", NO_CTX)
    if ctx is REQUIRED:
        raise TypeError(f"{codec!r} has no default context; use the *_with form")
    return ctx
