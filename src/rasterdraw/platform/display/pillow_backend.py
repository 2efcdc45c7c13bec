"""Pillow-backed RasterSurface and GlyphRenderer.

Example:
    from rasterdraw.platform.display.pillow_backend import PillowSurface

    surface = PillowSurface.new(320, 240, background=(255, 255, 255, 255))
    surface.set_pixel(10, 10, (255, 0, 0, 255))
    surface.save_png("/tmp/frame.png")

The surface wraps an RGBA ``PIL.Image.Image``. Pixel writes replace the
destination (no alpha blending), matching the rest of the drawing stack.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, cast

from PIL import Image, ImageDraw, ImageFont

from rasterdraw.core.models import TRANSPARENT, Bounds, Color, Point
from rasterdraw.render.fonts import FontSpec

logger = logging.getLogger(__name__)


class PillowSurface:
    """RasterSurface over an RGBA Pillow image.

    The image is drawn on in place. Other modes are rejected rather than
    converted, since conversion would leave the caller's image untouched;
    call ``image.convert("RGBA")`` first and keep the result.
    """

    def __init__(self, image: Image.Image) -> None:
        if image.mode != "RGBA":
            raise ValueError(f"PillowSurface needs an RGBA image, got {image.mode}")
        self._img = image
        self._px = image.load()
        w, h = image.size
        self._bounds = Bounds(0, 0, int(w), int(h))
        self._glyphs: Optional[PillowGlyphRenderer] = None

    @classmethod
    def new(
        cls, width: int, height: int, background: Color = TRANSPARENT
    ) -> "PillowSurface":
        return cls(Image.new("RGBA", (int(width), int(height)), tuple(background)))

    @property
    def image(self) -> Image.Image:
        return self._img

    def bounds(self) -> Bounds:
        return self._bounds

    def get_pixel(self, x: int, y: int) -> Color:
        if not self._bounds.contains(x, y):
            return TRANSPARENT
        return cast(Color, tuple(self._px[x, y]))

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if self._bounds.contains(x, y):
            self._px[x, y] = tuple(color)

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        b = self._bounds
        left, right = max(min(x0, x1), b.min_x), min(max(x0, x1) + 1, b.max_x)
        top, bottom = max(min(y0, y1), b.min_y), min(max(y0, y1) + 1, b.max_y)
        if left >= right or top >= bottom:
            return
        # paste with a color replaces the region, alpha included
        self._img.paste(tuple(color), (left, top, right, bottom))

    def glyph_renderer(self) -> "PillowGlyphRenderer":
        if self._glyphs is None:
            self._glyphs = PillowGlyphRenderer(self)
        return self._glyphs

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._img.save(path, format="PNG")


class PillowGlyphRenderer:
    """Text rendering through ``PIL.ImageFont``.

    ``typeface=None`` maps to Pillow's embedded default face at the
    requested pixel size; otherwise the typeface path is loaded with
    ``ImageFont.truetype``. Faces are cached per :class:`FontSpec`.
    """

    def __init__(self, surface: PillowSurface) -> None:
        self._surface = surface
        self._faces: Dict[FontSpec, Any] = {}

    def make_face(self, spec: FontSpec) -> Any:
        f = self._faces.get(spec)
        if f is None:
            px = spec.options.pixel_size
            if spec.typeface is None:
                f = ImageFont.load_default(size=px)
            else:
                f = ImageFont.truetype(spec.typeface, px)
            logger.debug("Loaded face %s at %dpx", spec.typeface or "<builtin>", px)
            self._faces[spec] = f
        return f

    def draw_text(self, face: Any, origin: Point, color: Color, text: str) -> None:
        draw = ImageDraw.Draw(self._surface.image)
        xy: Tuple[int, int] = (int(origin[0]), int(origin[1]))
        draw.text(xy, text, fill=tuple(color), font=face, anchor="ls")


__all__ = ["PillowSurface", "PillowGlyphRenderer"]
