"""Font configuration for text rendering.

A :class:`FontSpec` names a typeface (a TrueType file path, or ``None`` for
the backend's built-in bitmap face) together with :class:`FontOptions`.
Both are frozen pydantic models so backends can use them as cache keys.
Rendering itself happens in a :class:`~rasterdraw.render.canvas.GlyphRenderer`.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rasterdraw.settings.values import FONT_CANDIDATES, FONT_DEFAULTS

logger = logging.getLogger(__name__)

# Settings value asking for the first installed TrueType candidate
AUTO_TYPEFACE = "auto"


class FontOptions(BaseModel):
    """Rendering options for a face.

    Parameters
    ----------
    size: Font size in points.
    dpi: Resolution used to convert points to pixels. At the default 72 dpi
        one point is one pixel.
    """

    model_config = ConfigDict(frozen=True)

    size: float = Field(default=FONT_DEFAULTS["size"])
    dpi: float = Field(default=FONT_DEFAULTS["dpi"])

    @field_validator("size", "dpi")
    @classmethod
    def _chk_positive(cls, v: float) -> float:
        v = float(v)
        if not v > 0:
            raise ValueError("must be > 0")
        return v

    @property
    def pixel_size(self) -> int:
        return max(1, int(round(self.size * self.dpi / 72.0)))


class FontSpec(BaseModel):
    """Typeface plus options; ``typeface=None`` selects the built-in face."""

    model_config = ConfigDict(frozen=True)

    typeface: Optional[str] = None
    options: FontOptions = Field(default_factory=FontOptions)

    def with_size(self, size: float) -> "FontSpec":
        return FontSpec(
            typeface=self.typeface,
            options=FontOptions(size=size, dpi=self.options.dpi),
        )


def find_typeface(candidates: Sequence[str] | None = None) -> Optional[str]:
    """Return the first existing TrueType file among *candidates*.

    Defaults to the list configured in ``values.yml``. Returns None when
    nothing is installed, in which case callers keep the built-in face.
    """
    for path in FONT_CANDIDATES if candidates is None else candidates:
        if os.path.isfile(path):
            return path
    logger.debug("No TrueType candidate found; built-in face stays in use")
    return None


__all__ = ["AUTO_TYPEFACE", "FontOptions", "FontSpec", "find_typeface"]
