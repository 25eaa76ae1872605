"""
Draw primitives understood by the AWTRIX custom-app "draw" array.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FilledRect:
    """Filled rectangle with its top-left corner at (x, y)."""

    x: int
    y: int
    width: int
    height: int
    color: str

    def to_command(self) -> dict:
        return {"df": [self.x, self.y, self.width, self.height, self.color]}


@dataclass(frozen=True)
class Line:
    """Line from (x0, y0) to (x1, y1), both ends inclusive."""

    x0: int
    y0: int
    x1: int
    y1: int
    color: str

    def to_command(self) -> dict:
        return {"dl": [self.x0, self.y0, self.x1, self.y1, self.color]}


DrawPrimitive = FilledRect | Line


def to_commands(primitives: list) -> list[dict]:
    """Serialise primitives for the payload's draw field."""
    return [primitive.to_command() for primitive in primitives]
