"""Drawing context: style state bound to one raster surface.

Example:
    from rasterdraw.core.models import WHITE
    from rasterdraw.platform.display.pillow_backend import PillowSurface
    from rasterdraw.render.context import DrawContext

    surface = PillowSurface.new(64, 64, background=WHITE)
    ctx = DrawContext(surface)
    ctx.set_fill((255, 0, 0, 255))
    ctx.polygon([(10, 10), (50, 12), (30, 50)])
    ctx.cross(32, 32, 4)
    ctx.text(2, 62, "roi")
    surface.save_png("/tmp/overlay.png")

Every call writes straight to the surface; there is no frame or commit
step. The style is an immutable :class:`Style` that setters replace, so a
change only affects later calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Sequence

from rasterdraw.core.models import BLACK, TRANSPARENT, Color, Point
from rasterdraw.core.raster import (
    dedupe_points,
    is_in_polygon,
    line_points,
    parabola_points,
    polygon_bounds,
)
from rasterdraw.render.canvas import GlyphRenderer, RasterSurface, SupportsGlyphs
from rasterdraw.render.fonts import FontOptions, FontSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Style:
    pen: Color = BLACK
    fill: Color = TRANSPARENT
    text: Color = BLACK
    font: FontSpec = field(default_factory=FontSpec)


class DrawContext:
    """Draws primitives onto a single :class:`RasterSurface`.

    Parameters
    ----------
    surface: The raster buffer to draw on. Its lifetime is the caller's.
    style: Initial style; defaults to black pen, no fill, black text and
        the built-in font face.
    glyphs: Text renderer. When omitted and the surface offers
        ``glyph_renderer()``, that one is used; otherwise :meth:`text`
        is a logged no-op.
    """

    def __init__(
        self,
        surface: RasterSurface,
        *,
        style: Optional[Style] = None,
        glyphs: Optional[GlyphRenderer] = None,
    ) -> None:
        self._surface = surface
        self._style = style if style is not None else Style()
        if glyphs is None and isinstance(surface, SupportsGlyphs):
            glyphs = surface.glyph_renderer()
        self._glyphs = glyphs
        self._face: Any = self._build_face(self._style.font)

    @property
    def surface(self) -> RasterSurface:
        return self._surface

    @property
    def style(self) -> Style:
        return self._style

    # --- style --------------------------------------------------------------
    def set_style(self, style: Style) -> None:
        if style.font != self._style.font:
            self._apply_font(style.font, style)
        else:
            self._style = style

    def set_pen(self, color: Color) -> None:
        self._style = replace(self._style, pen=color)

    def set_fill(self, color: Color) -> None:
        self._style = replace(self._style, fill=color)

    def set_text_color(self, color: Color) -> None:
        self._style = replace(self._style, text=color)

    def set_font_face(
        self, typeface: Optional[str], options: Optional[FontOptions] = None
    ) -> None:
        """Replace typeface and options together and rebuild the face.

        ``typeface=None`` selects the built-in face. Omitted *options* means
        default options, not the current ones. If the face cannot be built
        the error propagates and the context keeps its previous font.
        """
        spec = FontSpec(typeface=typeface, options=options or FontOptions())
        self._apply_font(spec, replace(self._style, font=spec))

    def set_font_size(self, size: float) -> None:
        """Change only the font size, keeping typeface and other options."""
        spec = self._style.font.with_size(size)
        self._apply_font(spec, replace(self._style, font=spec))

    def _apply_font(self, spec: FontSpec, style: Style) -> None:
        # Face first: a failing make_face must leave style and face untouched
        face = self._build_face(spec)
        self._style = style
        self._face = face

    def _build_face(self, spec: FontSpec) -> Any:
        if self._glyphs is None:
            return None
        face = self._glyphs.make_face(spec)
        logger.debug(
            "Built face typeface=%s px=%d",
            spec.typeface or "<builtin>",
            spec.options.pixel_size,
        )
        return face

    # --- pixels -------------------------------------------------------------
    def dot(self, x: int, y: int) -> None:
        self._surface.set_pixel(x, y, self._style.pen)

    def fill_pixel(self, x: int, y: int) -> None:
        self._surface.set_pixel(x, y, self._style.fill)

    def dots(self, points: Sequence[Point]) -> None:
        for x, y in points:
            self.dot(x, y)

    # --- lines and shapes ---------------------------------------------------
    def line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Bresenham line; the higher endpoint on the major axis is not drawn."""
        for x, y in line_points(x0, y0, x1, y1):
            self.dot(x, y)

    def rect(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Fill then outline the inclusive box spanned by the two corners."""
        x0, x1 = min(x0, x1), max(x0, x1)
        y0, y1 = min(y0, y1), max(y0, y1)
        style = self._style
        if style.fill != TRANSPARENT:
            self._surface.fill_rect(x0, y0, x1, y1, style.fill)
        if style.pen != TRANSPARENT:
            self.line(x0, y0, x1, y0)
            self.line(x1, y0, x1, y1)
            self.line(x1, y1, x0, y1)
            self.line(x0, y0, x0, y1)
            # No edge reaches the far corner with exclusive endpoints
            self.dot(x1, y1)

    def cross(self, x: int, y: int, size: int) -> None:
        self.line(x, y - size, x, y + size)
        self.line(x - size, y, x + size, y)

    def path(self, points: Sequence[Point]) -> None:
        """Connect consecutive points with lines; the path is left open."""
        for (x0, y0), (x1, y1) in zip(points, points[1:]):
            self.line(x0, y0, x1, y1)

    def is_in_polygon(self, x: int, y: int, points: Sequence[Point]) -> bool:
        return is_in_polygon(x, y, points)

    def polygon(self, points: Sequence[Point]) -> None:
        """Fill (even-odd) then outline a polygon; the outline is closed.

        Repeated vertices are dropped first. The fill scan covers the
        vertices' bounding box clipped to the surface.
        """
        pts = dedupe_points(points)
        style = self._style
        if style.fill != TRANSPARENT:
            box = polygon_bounds(pts, self._surface.bounds())
            if box is not None:
                for y in range(box.min_y, box.max_y):
                    for x in range(box.min_x, box.max_x):
                        if is_in_polygon(x, y, pts):
                            self.fill_pixel(x, y)
        if style.pen != TRANSPARENT and len(pts) > 1:
            self.path(pts + [pts[0]])

    def parabola(self, a: float, b: float, c: float) -> None:
        """Plot y = a*x^2 + b*x + c across the full surface width."""
        clip = self._surface.bounds()
        for x, y in parabola_points(a, b, c, clip.min_x, clip.max_x, clip):
            self.dot(x, y)

    def parabola_arc(self, a: float, b: float, c: float, x1: int, x2: int) -> None:
        """Plot the parabola for x in [x1, x2), clamped to the surface."""
        clip = self._surface.bounds()
        for x, y in parabola_points(a, b, c, x1, x2, clip):
            self.dot(x, y)

    # --- text ---------------------------------------------------------------
    def text(self, x: int, y: int, text: str) -> None:
        """Draw *text* with its baseline starting at (x, y) in text color."""
        if self._glyphs is None:
            logger.warning("text(%r) skipped: no glyph renderer available", text)
            return
        self._glyphs.draw_text(self._face, (x, y), self._style.text, text)


__all__ = ["Style", "DrawContext"]
