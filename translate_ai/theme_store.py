"""Durable storage for the light/dark theme preference."""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
THEMES = ("dark", "light")


class ThemeStore(ABC):
    """Single-key store holding "dark" or "light"."""

    @abstractmethod
    def load(self) -> str | None:
        """Return the stored theme, or None if nothing valid is stored."""
        ...

    @abstractmethod
    def save(self, theme: str) -> None:
        """Persist the theme. Only "dark" and "light" are accepted."""
        ...


def _check_theme(theme: str) -> None:
    if theme not in THEMES:
        raise ValueError(f"Invalid theme '{theme}'. Expected one of {THEMES}")


class MemoryThemeStore(ThemeStore):
    """In-process store; the preference lives as long as the object."""

    def __init__(self, theme: str | None = None) -> None:
        if theme is not None:
            _check_theme(theme)
        self._theme = theme

    def load(self) -> str | None:
        return self._theme

    def save(self, theme: str) -> None:
        _check_theme(theme)
        self._theme = theme


class FileThemeStore(ThemeStore):
    """Keeps the preference in a small JSON settings file.

    Other keys in the file are preserved on save. A missing, unreadable or
    malformed file reads as "no preference".
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> str | None:
        theme = self._read().get(THEME_KEY)
        return theme if theme in THEMES else None

    def save(self, theme: str) -> None:
        _check_theme(theme)
        data = self._read()
        data[THEME_KEY] = theme
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        logger.debug("Saved theme=%s to %s", theme, self.path)
