from __future__ import annotations


class Offset:
    """
    Caller-owned cursor position passed to every cursor-layer call.

    Only the cursor layer moves it forward. Callers may copy it to branch,
    seek it to reset, or drop it.
    """
    __slots__ = ("pos",)

    def __init__(self, pos: int = 0):
        if pos < 0:
            raise ValueError(f"offset must be non-negative, got {pos}")
        self.pos = pos

    def tell(self) -> int: return self.pos
    def copy(self) -> "Offset": return Offset(self.pos)

    def seek(self, pos: int) -> None:
        if pos < 0:
            raise ValueError(f"offset must be non-negative, got {pos}")
        self.pos = pos

    def __int__(self) -> int: return self.pos
    def __index__(self) -> int: return self.pos

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Offset):
            return self.pos == other.pos
        if isinstance(other, int):
            return self.pos == other
        return NotImplemented

    def __hash__(self) -> int: return hash(self.pos)
    def __repr__(self) -> str: return f"Offset({self.pos})"
