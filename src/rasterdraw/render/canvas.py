"""Framework-agnostic RasterSurface and GlyphRenderer protocols.

Defines the minimal pixel contract the drawing context needs from a raster
buffer, and the text rendering contract, so different frameworks (pillow,
pygame, etc.) can be plugged in.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from rasterdraw.core.models import Bounds, Color, Point
from rasterdraw.render.fonts import FontSpec


class RasterSurface(Protocol):
    def bounds(self) -> Bounds:
        ...

    def get_pixel(self, x: int, y: int) -> Color:
        ...

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Replace the pixel at (x, y); writes outside bounds are ignored."""
        ...

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        """Replace every pixel in the inclusive box, clipped to bounds."""
        ...


class GlyphRenderer(Protocol):
    def make_face(self, spec: FontSpec) -> Any:
        """Build a renderable face from a typeface and its options."""
        ...

    def draw_text(self, face: Any, origin: Point, color: Color, text: str) -> None:
        """Rasterize *text* with its baseline starting at *origin*."""
        ...


@runtime_checkable
class SupportsGlyphs(Protocol):
    """Surfaces that can provide a glyph renderer bound to themselves."""

    def glyph_renderer(self) -> GlyphRenderer:
        ...
