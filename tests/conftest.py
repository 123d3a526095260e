"""Shared test fixtures for the harpoon-tui test suite."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A project checkout with a couple of files to bookmark."""
    root = tmp_path / "proj"
    (root / "src").mkdir(parents=True)
    (root / "a.txt").write_text("hello world\nsecond line\nthird line\n")
    (root / "src" / "main.py").write_text("print('hi')\n")
    return root


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Location of the bookmark file (not created)."""
    return tmp_path / "state" / "harpoon.json"


@pytest.fixture(autouse=True)
def _no_store_env(monkeypatch):
    """Keep $HARPOON_STORE from leaking in from the developer's shell."""
    monkeypatch.delenv("HARPOON_STORE", raising=False)
