# -*- coding: utf-8 -*-
"""Half-open pixel rectangles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """Rectangle covering x in [min_x, max_x) and y in [min_y, max_y)."""

    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0

    @classmethod
    def from_size(cls, width: int, height: int, origin: tuple[int, int] = (0, 0)) -> Rect:
        x, y = origin
        return cls(x, y, x + width, y + height)

    @property
    def dx(self) -> int:
        return self.max_x - self.min_x

    @property
    def dy(self) -> int:
        return self.max_y - self.min_y

    @property
    def size(self) -> tuple[int, int]:
        return self.dx, self.dy

    @property
    def area(self) -> int:
        if self.empty:
            return 0
        return self.dx * self.dy

    @property
    def empty(self) -> bool:
        return self.min_x >= self.max_x or self.min_y >= self.max_y

    def intersect(self, other: Rect) -> Rect:
        """Return the overlap of both rectangles, or the zero rectangle."""
        rect = Rect(
            max(self.min_x, other.min_x),
            max(self.min_y, other.min_y),
            min(self.max_x, other.max_x),
            min(self.max_y, other.max_y),
        )
        if rect.empty:
            return Rect()
        return rect

    def union(self, other: Rect) -> Rect:
        """Return the smallest rectangle covering both; empty inputs are ignored."""
        if self.empty:
            return other
        if other.empty:
            return self
        return Rect(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def slices_in(self, outer: Rect) -> tuple[slice, slice]:
        """Row/column slices addressing this rectangle inside an array laid out over `outer`."""
        return (
            slice(self.min_y - outer.min_y, self.max_y - outer.min_y),
            slice(self.min_x - outer.min_x, self.max_x - outer.min_x),
        )

    def to_dict(self) -> dict[str, int]:
        return {"min_x": self.min_x, "min_y": self.min_y, "max_x": self.max_x, "max_y": self.max_y}
