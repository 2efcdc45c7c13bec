"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. On import we attempt to
load and parse it; failures fall back to the hard-coded literals below so
the library still works when PyYAML is missing or the file is corrupt.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple, cast

try:  # PyYAML is optional at runtime
    import yaml
except Exception:  # pragma: no cover - exercised only without PyYAML
    yaml = cast(Any, None)

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ----------------------------------------------------
_FALLBACK_COLORS: Dict[str, Tuple[int, int, int, int]] = {
    "pen": (0, 0, 0, 255),
    "fill": (0, 0, 0, 0),
    "text": (0, 0, 0, 255),
}
_FALLBACK_FONT = {"size": 12.0, "dpi": 72.0}
_FALLBACK_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/truetype/freefont/FreeMono.ttf",
    "/Library/Fonts/Menlo.ttc",
    "/Library/Fonts/Consolas.ttf",
]


def _as_color(v: Any) -> Tuple[int, int, int, int] | None:
    if not isinstance(v, (list, tuple)) or len(v) != 4:
        return None
    try:
        c = tuple(int(ch) for ch in v)
    except (TypeError, ValueError):
        return None
    if any(ch < 0 or ch > 255 for ch in c):
        return None
    return cast(Tuple[int, int, int, int], c)


# --- Load YAML -------------------------------------------------------------
_colors: Dict[str, Tuple[int, int, int, int]] = dict(_FALLBACK_COLORS)
_font: Dict[str, float] = dict(_FALLBACK_FONT)
_font_candidates: List[str] = list(_FALLBACK_FONT_CANDIDATES)

if yaml is not None and _YAML_PATH.exists():  # pragma: no branch - simple path
    try:
        with _YAML_PATH.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        colors = raw.get("colors", {})
        if isinstance(colors, dict):
            for key in ("pen", "fill", "text"):
                c = _as_color(colors.get(key))
                if c is not None:
                    _colors[key] = c
        font = raw.get("font", {})
        if isinstance(font, dict):
            for key in ("size", "dpi"):
                v = font.get(key)
                if isinstance(v, (int, float)) and v > 0:
                    _font[key] = float(v)
            cands = font.get("candidates")
            if isinstance(cands, list) and all(isinstance(x, str) for x in cands):
                _font_candidates = list(cands)
    except Exception:  # pragma: no cover - defensive parse guard
        logger.warning("Could not parse %s; using built-in defaults", _YAML_PATH)

# --- Public accessors ------------------------------------------------------
DEFAULT_COLORS: Dict[str, Tuple[int, int, int, int]] = dict(_colors)
FONT_DEFAULTS: Dict[str, float] = dict(_font)
FONT_CANDIDATES: Sequence[str] = tuple(_font_candidates)

__all__ = ["DEFAULT_COLORS", "FONT_DEFAULTS", "FONT_CANDIDATES"]
