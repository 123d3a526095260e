"""Config/data locations for harpoon-tui."""

from __future__ import annotations

import os
from pathlib import Path

STORE_ENV_VAR = "HARPOON_STORE"


def harpoon_home() -> Path:
    """Return ``~/.harpoon``, the config/data directory."""
    return Path.home() / ".harpoon"


def harpoon_file(name: str) -> Path:
    """Return ``~/.harpoon/<name>``."""
    return harpoon_home() / name


def harpoon_store_file(override: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the bookmark file: explicit override > $HARPOON_STORE > default."""
    if override:
        return Path(override).expanduser()
    env = os.environ.get(STORE_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return harpoon_file("harpoon.json")


def current_working_dir() -> Path:
    return Path.cwd()
