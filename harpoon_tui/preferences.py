"""User preferences for harpoon-tui.

Loads settings from ~/.harpoon/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .log import logger
from .platform import STORE_ENV_VAR, harpoon_file, harpoon_store_file

PREFS_PATH = harpoon_file("preferences.yaml")

_DEFAULT_YAML = """\
# harpoon-tui preferences
# Delete this file to reset to defaults.

store:
  path: ""                # bookmark file (empty = ~/.harpoon/harpoon.json)

list:
  title: "Harpoon List"   # heading of the /harpoon-list popup

navigation:
  recenter: true          # center the view on the restored selection
"""


@dataclass
class StorePreferences:
    """Where the bookmark file lives."""

    path: str = ""  # Empty means ~/.harpoon/harpoon.json (or $HARPOON_STORE)


@dataclass
class ListPreferences:
    title: str = "Harpoon List"


@dataclass
class NavigationPreferences:
    recenter: bool = True


@dataclass
class Preferences:
    """Top-level preferences."""

    store: StorePreferences = field(default_factory=StorePreferences)
    listing: ListPreferences = field(default_factory=ListPreferences)
    navigation: NavigationPreferences = field(default_factory=NavigationPreferences)

    def store_path(self, override: str | Path | None = None) -> Path:
        """Bookmark file: *override* > $HARPOON_STORE > ``store.path`` > default."""
        if override:
            return harpoon_store_file(override)
        if os.environ.get(STORE_ENV_VAR) or not self.store.path:
            return harpoon_store_file()
        return harpoon_store_file(self.store.path)


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or PREFS_PATH
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError):
            logger.debug("failed to load preferences from %s", path, exc_info=True)
            return prefs
        if not isinstance(data, dict):
            return prefs
        if isinstance(data.get("store"), dict):
            sdata = data["store"]
            if "path" in sdata:
                prefs.store.path = str(sdata["path"] or "")
        if isinstance(data.get("list"), dict):
            ldata = data["list"]
            if ldata.get("title"):
                prefs.listing.title = str(ldata["title"])
        if isinstance(data.get("navigation"), dict):
            ndata = data["navigation"]
            if "recenter" in ndata:
                prefs.navigation.recenter = bool(ndata["recenter"])
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
        except OSError:
            logger.debug("could not write default preferences to %s", path)

    return prefs
