"""Pygame-backed RasterSurface and GlyphRenderer with headless support.

Suitable for deterministic, headless use by setting the environment
variable SDL_VIDEODRIVER=dummy before importing pygame.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from rasterdraw.platform.display.pygame_backend import PygameSurface
    from rasterdraw.render.context import DrawContext

    surface = PygameSurface.new(320, 240, background=(0, 0, 0, 255))
    ctx = DrawContext(surface)
    ctx.set_pen((255, 255, 0, 255))
    ctx.line(10, 10, 310, 10)
    surface.save_png("/tmp/frame.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple, cast

from rasterdraw.core.models import TRANSPARENT, Bounds, Color, Point
from rasterdraw.render.fonts import FontSpec

pg: Any = None
try:  # pragma: no cover - import guard for environments without SDL
    import pygame as _pg

    pg = _pg
except Exception:  # pragma: no cover
    pg = None


def _pygame_color(c: Color) -> Tuple[int, int, int, int]:
    r, g, b, a = c
    return int(r), int(g), int(b), int(a)


def _require_pygame() -> Any:
    local_pg = pg
    if local_pg is None:
        raise RuntimeError(
            "pygame is not available. "
            "Ensure it is installed and that SDL is configured."
        )
    return local_pg


class PygameSurface:
    """RasterSurface over a ``pygame.Surface``."""

    def __init__(self, surface: Any) -> None:
        _require_pygame()
        self._surface = surface
        w, h = surface.get_size()
        self._bounds = Bounds(0, 0, int(w), int(h))
        self._glyphs: Optional[PygameGlyphRenderer] = None

    @classmethod
    def new(
        cls, width: int, height: int, background: Color = TRANSPARENT
    ) -> "PygameSurface":
        local_pg = _require_pygame()
        # SRCALPHA keeps per-pixel alpha so TRANSPARENT round-trips
        surf = local_pg.Surface((int(width), int(height)), flags=local_pg.SRCALPHA)
        surf.fill(_pygame_color(background))
        return cls(surf)

    @property
    def raw(self) -> Any:
        return self._surface

    def bounds(self) -> Bounds:
        return self._bounds

    def get_pixel(self, x: int, y: int) -> Color:
        if not self._bounds.contains(x, y):
            return TRANSPARENT
        return cast(Color, tuple(self._surface.get_at((x, y))))

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if self._bounds.contains(x, y):
            self._surface.set_at((x, y), _pygame_color(color))

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        left, top = min(x0, x1), min(y0, y1)
        w = abs(x1 - x0) + 1
        h = abs(y1 - y0) + 1
        # Surface.fill clips to the surface and replaces pixels
        self._surface.fill(_pygame_color(color), pg.Rect(left, top, w, h))

    def glyph_renderer(self) -> "PygameGlyphRenderer":
        if self._glyphs is None:
            self._glyphs = PygameGlyphRenderer(self)
        return self._glyphs

    def save_png(self, path: str) -> None:
        local_pg = _require_pygame()
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        local_pg.image.save(self._surface, path)


class PygameGlyphRenderer:
    """Text rendering through ``pygame.font.Font``.

    ``typeface=None`` loads pygame's default font. Faces are cached per
    :class:`FontSpec`.
    """

    def __init__(self, surface: PygameSurface) -> None:
        local_pg = _require_pygame()
        if not local_pg.font.get_init():
            local_pg.font.init()
        self._surface = surface
        self._faces: Dict[FontSpec, Any] = {}

    def make_face(self, spec: FontSpec) -> Any:
        f = self._faces.get(spec)
        if f is None:
            f = pg.font.Font(spec.typeface, spec.options.pixel_size)
            self._faces[spec] = f
        return f

    def draw_text(self, face: Any, origin: Point, color: Color, text: str) -> None:
        # Antialiased rendering for consistent appearance
        surf = face.render(text, True, _pygame_color(color))
        x, y = int(origin[0]), int(origin[1])
        # Origin is on the baseline; blit wants the top-left corner
        self._surface.raw.blit(surf, (x, y - face.get_ascent()))


__all__ = ["PygameSurface", "PygameGlyphRenderer"]
