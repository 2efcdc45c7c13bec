"""Pydantic model for persisted drawing defaults."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .values import DEFAULT_COLORS, FONT_DEFAULTS

RGBA = Tuple[int, int, int, int]


class DrawSettings(BaseModel):
    """Drawing defaults applied to new contexts.

    Parameters
    ----------
    pen: Outline color, RGBA.
    fill: Fill color, RGBA. ``[0, 0, 0, 0]`` disables filling.
    text: Text color, RGBA.
    typeface: Path to a TrueType file, null for the built-in face, or
        ``"auto"`` for the first installed entry of ``font.candidates`` in
        values.yml.
    font_size: Font size in points.
    font_dpi: Resolution used to convert points to pixels.
    """

    pen: RGBA = Field(default=DEFAULT_COLORS["pen"])
    fill: RGBA = Field(default=DEFAULT_COLORS["fill"])
    text: RGBA = Field(default=DEFAULT_COLORS["text"])
    typeface: Optional[str] = Field(default=None)
    font_size: float = Field(default=FONT_DEFAULTS["size"])
    font_dpi: float = Field(default=FONT_DEFAULTS["dpi"])

    @field_validator("pen", "fill", "text", mode="before")
    @classmethod
    def _chk_color(cls, v: Any) -> Any:
        if not isinstance(v, (list, tuple)) or len(v) != 4:
            raise ValueError("color must be 4 RGBA channels")
        for ch in v:
            if isinstance(ch, bool) or not isinstance(ch, int):
                raise ValueError("color channels must be integers")
            if ch < 0 or ch > 255:
                raise ValueError("color channels must be within 0..255")
        return tuple(v)

    @field_validator("font_size", "font_dpi")
    @classmethod
    def _chk_positive(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("font_size and font_dpi must be > 0")
        return v
