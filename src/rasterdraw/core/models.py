"""Value types shared by the drawing context and the surface backends.

Points and colors are plain tuples so callers can pass literals; bounds are
a small frozen dataclass with half-open semantics matching pixel grids.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[int, int]
Color = Tuple[int, int, int, int]

# Fully transparent sentinel: disables the outline or fill phase it is set on.
TRANSPARENT: Color = (0, 0, 0, 0)
BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned pixel rectangle.

    ``min_x``/``min_y`` are inclusive, ``max_x``/``max_y`` exclusive, so a
    ``width`` x ``height`` image anchored at the origin is
    ``Bounds(0, 0, width, height)``.
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return max(0, self.max_x - self.min_x)

    @property
    def height(self) -> int:
        return max(0, self.max_y - self.min_y)

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, x: int, y: int) -> bool:
        return self.min_x <= x < self.max_x and self.min_y <= y < self.max_y


__all__ = ["Point", "Color", "TRANSPARENT", "BLACK", "WHITE", "Bounds"]
