"""Floating-point rectangles and level tiles."""

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass
class Rect:
    """An axis-aligned rectangle with float coordinates."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.w <= 0 or self.h <= 0

    def intersects(self, other: "Rect") -> bool:
        """True if both rectangles are non-empty and overlap with positive area."""
        if self.is_empty or other.is_empty:
            return False
        overlap_x = min(self.x + self.w, other.x + other.w) > max(self.x, other.x)
        overlap_y = min(self.y + self.h, other.y + other.h) > max(self.y, other.y)
        return overlap_x and overlap_y

    def contains_point(self, x: float, y: float) -> bool:
        """True if the point lies inside; left and top edges are inclusive."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h

    def moved(self, dx: float, dy: float) -> "Rect":
        """Return a copy shifted by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)


@dataclass
class Tile:
    """One placed tile of a level."""

    texture: Any = None
    rect: Rect = field(default_factory=Rect)
    solid: bool = False