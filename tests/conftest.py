from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Tuple

import pytest

from rasterdraw.core.models import TRANSPARENT, WHITE, Bounds, Color, Point
from rasterdraw.platform.display.pillow_backend import PillowSurface


class RecordingSurface:
    """In-memory surface that remembers every write, in call order."""

    def __init__(self, width: int = 32, height: int = 32) -> None:
        self._bounds = Bounds(0, 0, width, height)
        self.pixels: Dict[Point, Color] = {}
        self.writes: List[Tuple[int, int, Color]] = []
        self.fills: List[Tuple[int, int, int, int, Color]] = []

    def bounds(self) -> Bounds:
        return self._bounds

    def get_pixel(self, x: int, y: int) -> Color:
        return self.pixels.get((x, y), TRANSPARENT)

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self.writes.append((x, y, color))
        if self._bounds.contains(x, y):
            self.pixels[(x, y)] = color

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
        self.fills.append((x0, y0, x1, y1, color))
        for y in range(min(y0, y1), max(y0, y1) + 1):
            for x in range(min(x0, x1), max(x0, x1) + 1):
                if self._bounds.contains(x, y):
                    self.pixels[(x, y)] = color

    def points(self, color: Color | None = None) -> set[Point]:
        return {p for p, c in self.pixels.items() if color is None or c == color}


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RASTERDRAW_HOME", str(tmp_path / "home"))


@pytest.fixture
def recording() -> Callable[..., RecordingSurface]:
    def _make(width: int = 32, height: int = 32) -> RecordingSurface:
        return RecordingSurface(width, height)

    return _make


@pytest.fixture
def make_surface() -> Callable[..., PillowSurface]:
    def _make(width: int = 10, height: int = 10, background: Color = WHITE) -> PillowSurface:
        return PillowSurface.new(width, height, background=background)

    return _make
