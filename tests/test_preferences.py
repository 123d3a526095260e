"""Tests for harpoon_tui.preferences.

All file I/O uses tmp_path so nothing touches the real user config.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from harpoon_tui.platform import harpoon_file
from harpoon_tui.preferences import Preferences, load_preferences


class TestLoadPreferences:
    def test_missing_file_creates_default(self, tmp_path):
        path = tmp_path / "cfg" / "preferences.yaml"
        prefs = load_preferences(path)
        assert prefs == Preferences()
        assert path.exists()
        data = yaml.safe_load(path.read_text())
        assert data["list"]["title"] == "Harpoon List"
        assert data["navigation"]["recenter"] is True

    def test_default_file_loads_as_defaults(self, tmp_path):
        path = tmp_path / "preferences.yaml"
        load_preferences(path)
        assert load_preferences(path) == Preferences()

    def test_values_read(self, tmp_path):
        path = tmp_path / "preferences.yaml"
        path.write_text(
            "store:\n  path: ~/marks.json\n"
            "list:\n  title: Marks\n"
            "navigation:\n  recenter: false\n"
        )
        prefs = load_preferences(path)
        assert prefs.store.path == "~/marks.json"
        assert prefs.listing.title == "Marks"
        assert prefs.navigation.recenter is False

    def test_partial_file_keeps_other_defaults(self, tmp_path):
        path = tmp_path / "preferences.yaml"
        path.write_text("navigation:\n  recenter: no\n")
        prefs = load_preferences(path)
        assert prefs.navigation.recenter is False
        assert prefs.listing.title == "Harpoon List"
        assert prefs.store.path == ""

    def test_invalid_yaml_falls_back(self, tmp_path):
        path = tmp_path / "preferences.yaml"
        path.write_text("list: [unclosed\n")
        assert load_preferences(path) == Preferences()

    def test_non_mapping_falls_back(self, tmp_path):
        path = tmp_path / "preferences.yaml"
        path.write_text("- just\n- a list\n")
        assert load_preferences(path) == Preferences()

    def test_empty_title_ignored(self, tmp_path):
        path = tmp_path / "preferences.yaml"
        path.write_text('list:\n  title: ""\n')
        assert load_preferences(path).listing.title == "Harpoon List"


class TestStorePath:
    def test_default(self):
        assert Preferences().store_path() == harpoon_file("harpoon.json")

    def test_preference(self, tmp_path):
        prefs = Preferences()
        prefs.store.path = str(tmp_path / "marks.json")
        assert prefs.store_path() == tmp_path / "marks.json"

    def test_env_beats_preference(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HARPOON_STORE", str(tmp_path / "env.json"))
        prefs = Preferences()
        prefs.store.path = str(tmp_path / "marks.json")
        assert prefs.store_path() == tmp_path / "env.json"

    def test_override_beats_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HARPOON_STORE", str(tmp_path / "env.json"))
        assert Preferences().store_path(tmp_path / "cli.json") == tmp_path / "cli.json"

    def test_user_expanded(self):
        prefs = Preferences()
        prefs.store.path = "~/marks.json"
        assert prefs.store_path() == Path.home() / "marks.json"
