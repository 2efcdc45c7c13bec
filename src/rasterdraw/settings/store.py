"""Settings persistence helpers."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .schema import DrawSettings

logger = logging.getLogger(__name__)


class SettingsStore:
    """Load and save :class:`DrawSettings` to disk."""

    @staticmethod
    def settings_path() -> Path:
        """Return the path to the settings JSON file."""
        home = os.environ.get("RASTERDRAW_HOME")
        if home:
            base = Path(home).expanduser()
        else:
            base = Path(os.path.expanduser("~/.rasterdraw"))
        return base / "settings.json"

    @classmethod
    def ensure_home(cls) -> Path:
        """Ensure the settings directory exists and return it."""
        path = cls.settings_path().parent
        path.mkdir(parents=True, exist_ok=True)
        return path

    @classmethod
    def load(cls) -> DrawSettings:
        """Load settings from disk, returning defaults when absent or invalid."""
        path = cls.settings_path()
        if not path.exists():
            return DrawSettings()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return DrawSettings.model_validate(data)
        except (OSError, ValueError, ValidationError) as exc:
            logger.warning("Ignoring unreadable settings at %s: %s", path, exc)
            return DrawSettings()

    @classmethod
    def save(cls, settings: DrawSettings) -> None:
        """Atomically persist *settings* to disk."""
        path = cls.settings_path()
        cls.ensure_home()
        tmp = path.with_suffix(".tmp")
        tmp.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp, path)
