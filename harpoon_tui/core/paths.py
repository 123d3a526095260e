"""Path helpers for project-relative bookmark paths."""

from __future__ import annotations

import os
from pathlib import Path, PurePath


def project_key(cwd: str | os.PathLike[str]) -> str:
    """Return the canonical store key for the project rooted at *cwd*.

    Absolute and lexically normalized, without resolving symlinks, so the
    same working directory always maps to the same key.
    """
    return os.path.normpath(os.path.abspath(os.fspath(cwd)))


def normalize_path(path: str | os.PathLike[str], cwd: str | os.PathLike[str]) -> str:
    """Make *path* relative to *cwd* when it lies inside it.

    Paths outside *cwd* are returned unchanged and relative paths are only
    lexically normalized.  No filesystem access.
    """
    raw = os.fspath(path)
    if not os.path.isabs(raw):
        return os.path.normpath(raw)
    candidate = PurePath(os.path.normpath(raw))
    try:
        return str(candidate.relative_to(project_key(cwd)))
    except ValueError:
        return raw


def resolve_path(path: str, cwd: str | os.PathLike[str]) -> Path:
    """Turn a stored (possibly relative) path back into an absolute one."""
    stored = Path(path)
    if stored.is_absolute():
        return stored
    return Path(project_key(cwd)) / stored
