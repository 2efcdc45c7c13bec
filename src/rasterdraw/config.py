"""Runtime configuration helpers.

Small factory layer that turns persisted :class:`DrawSettings` into the
immutable :class:`Style` a drawing context starts from.
"""
from __future__ import annotations

from typing import Optional

from .render.canvas import GlyphRenderer, RasterSurface
from .render.context import DrawContext, Style
from .render.fonts import AUTO_TYPEFACE, FontOptions, FontSpec, find_typeface
from .settings.schema import DrawSettings
from .settings.store import SettingsStore


def make_style(settings: Optional[DrawSettings] = None) -> Style:
    """Build a Style from *settings*, or from the persisted store if None.

    A typeface of ``"auto"`` is resolved through :func:`find_typeface`.
    """
    if settings is None:
        settings = SettingsStore.load()
    typeface = settings.typeface
    if typeface == AUTO_TYPEFACE:
        # First installed candidate from values.yml, else the built-in face
        typeface = find_typeface()
    return Style(
        pen=settings.pen,
        fill=settings.fill,
        text=settings.text,
        font=FontSpec(
            typeface=typeface,
            options=FontOptions(size=settings.font_size, dpi=settings.font_dpi),
        ),
    )


def make_context(
    surface: RasterSurface,
    *,
    settings: Optional[DrawSettings] = None,
    glyphs: Optional[GlyphRenderer] = None,
) -> DrawContext:
    """Create a DrawContext on *surface* styled from *settings*."""
    return DrawContext(surface, style=make_style(settings), glyphs=glyphs)
