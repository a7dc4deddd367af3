"""Light/dark theme preference persisted through an injected storage."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from portfolio_site.models.page import Theme

logger = logging.getLogger(__name__)

THEME_KEY = "current-theme"


class KeyValueStorage(Protocol):
    """String key/value storage, shaped like browser local storage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """Storage kept in a dict for the lifetime of the object."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage:
    """Storage persisted to a JSON object file."""

    def __init__(self, path: Path):
        self.path = path

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8").strip()
            data = json.loads(raw) if raw else {}
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {exc}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _save(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)


class ThemeManager:
    """Reads the theme at load and writes it on every change."""

    def __init__(self, storage: KeyValueStorage, prefers_dark: bool = False):
        self.storage = storage
        self.prefers_dark = prefers_dark
        self.theme = self.load()

    def load(self) -> Theme:
        """Stored theme, else the system colour-scheme preference."""
        stored = self.storage.get_item(THEME_KEY)
        if stored:
            try:
                return Theme(stored)
            except ValueError:
                logger.warning(f"Ignoring unknown stored theme {stored!r}")
        return Theme.dark if self.prefers_dark else Theme.light

    def set_theme(self, theme: Theme) -> Theme:
        self.theme = Theme(theme)
        self.storage.set_item(THEME_KEY, self.theme.value)
        return self.theme

    def toggle(self) -> Theme:
        return self.set_theme(self.theme.opposite)
