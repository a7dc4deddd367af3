"""Tests for theme persistence."""

import json

from portfolio_site.core.theme import THEME_KEY, JsonFileStorage, MemoryStorage, ThemeManager
from portfolio_site.models.page import Theme


class TestThemeManager:
    def test_defaults_to_system_preference(self):
        assert ThemeManager(MemoryStorage()).theme == Theme.light
        assert ThemeManager(MemoryStorage(), prefers_dark=True).theme == Theme.dark

    def test_stored_theme_wins(self):
        storage = MemoryStorage({THEME_KEY: "light"})
        assert ThemeManager(storage, prefers_dark=True).theme == Theme.light

    def test_unknown_stored_value_ignored(self):
        storage = MemoryStorage({THEME_KEY: "sepia"})
        assert ThemeManager(storage, prefers_dark=True).theme == Theme.dark

    def test_toggle_persists(self):
        storage = MemoryStorage()
        manager = ThemeManager(storage)
        assert manager.toggle() == Theme.dark
        assert storage.get_item(THEME_KEY) == "dark"
        assert manager.toggle() == Theme.light
        assert storage.get_item(THEME_KEY) == "light"

    def test_set_theme(self):
        storage = MemoryStorage()
        ThemeManager(storage).set_theme(Theme.dark)
        assert ThemeManager(storage).theme == Theme.dark


class TestJsonFileStorage:
    def test_missing_file(self, tmp_path):
        assert JsonFileStorage(tmp_path / "prefs.json").get_item(THEME_KEY) is None

    def test_round_trip_survives_new_instance(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        JsonFileStorage(path).set_item(THEME_KEY, "dark")
        assert JsonFileStorage(path).get_item(THEME_KEY) == "dark"
        assert json.loads(path.read_text(encoding="utf-8")) == {THEME_KEY: "dark"}

    def test_corrupt_file_falls_back_to_preference(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{oops", encoding="utf-8")
        storage = JsonFileStorage(path)
        assert storage.get_item(THEME_KEY) is None
        assert ThemeManager(storage, prefers_dark=True).theme == Theme.dark

    def test_corrupt_file_is_overwritten_on_toggle(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{oops", encoding="utf-8")
        ThemeManager(JsonFileStorage(path)).toggle()
        assert json.loads(path.read_text(encoding="utf-8")) == {THEME_KEY: "dark"}

    def test_keeps_other_keys(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"other": "x"}), encoding="utf-8")
        JsonFileStorage(path).set_item(THEME_KEY, "light")
        assert json.loads(path.read_text(encoding="utf-8")) == {"other": "x", THEME_KEY: "light"}
