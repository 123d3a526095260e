"""Harpoon bookmark persistence store.

On-disk layout::

    {
      "projects": {
        "/abs/project/root": {
          "files": {
            "1": {"path": "src/a.py", "spans": [{"start": 3, "end": 7}]}
          }
        }
      }
    }

The whole file is loaded on every command and rewritten in full on every
save.  Index keys are decimal strings on disk and ``int`` in memory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from ._base import JsonStore
from ..errors import StoreDecodeError
from ..paths import project_key, resolve_path
from ..selection import Selection, Span, selection_from_spans, spans_from_selection
from ...log import logger


@dataclass
class FileRecord:
    """A bookmarked location: project-relative path plus restorable selection."""

    path: str
    spans: list[Span]

    def __post_init__(self) -> None:
        if not self.spans:
            raise ValueError("a bookmark needs at least one span")

    @classmethod
    def new(cls, path: str | os.PathLike[str], selection: Selection) -> FileRecord:
        """Build a record from an already normalized *path*."""
        return cls(path=os.fspath(path), spans=spans_from_selection(selection))

    def update_selection(self, selection: Selection) -> None:
        """Replace the stored spans; the path is left alone."""
        self.spans = spans_from_selection(selection)

    def as_selection(self) -> Selection:
        return selection_from_spans(self.spans)

    def to_dict(self) -> dict:
        return {"path": self.path, "spans": [s.to_dict() for s in self.spans]}

    @classmethod
    def from_dict(cls, data: dict) -> FileRecord:
        path = data["path"]
        if not isinstance(path, str):
            raise ValueError(f"path must be a string, got {path!r}")
        spans = data["spans"]
        if not isinstance(spans, list):
            raise ValueError(f"spans must be a list, got {spans!r}")
        return cls(path=path, spans=[Span.from_dict(s) for s in spans])


@dataclass
class Project:
    """Slot table for one project root: sparse ``index -> FileRecord``."""

    files: dict[int, FileRecord] = field(default_factory=dict)

    def sorted_files(self) -> list[tuple[int, FileRecord]]:
        return sorted(self.files.items())

    def find_by_path(self, path: str) -> tuple[int, FileRecord] | None:
        """First record whose stored path equals *path* (already normalized)."""
        for index, record in self.files.items():
            if record.path == path:
                return index, record
        return None

    def to_dict(self) -> dict:
        return {"files": {str(i): r.to_dict() for i, r in self.files.items()}}

    @classmethod
    def from_dict(cls, data: dict) -> Project:
        raw_files = data["files"]
        if not isinstance(raw_files, dict):
            raise ValueError(f"files must be an object, got {raw_files!r}")
        files: dict[int, FileRecord] = {}
        for key, value in raw_files.items():
            files[_decode_index(key)] = FileRecord.from_dict(value)
        return cls(files=files)


def _decode_index(key: str) -> int:
    if not key.isascii() or not key.isdigit():
        raise ValueError(f"bookmark index must be a decimal integer, got {key!r}")
    index = int(key)
    if str(index) != key:
        raise ValueError(f"bookmark index must not have leading zeros, got {key!r}")
    return index


class HarpoonStore(JsonStore):
    """All projects' slot tables, bound to the working directory of the call.

    Every operation acts on the table for ``cwd``; other projects are only
    carried along so that ``save()`` writes them back untouched.
    """

    def __init__(
        self,
        path: Path,
        cwd: str | os.PathLike[str],
        projects: dict[str, Project] | None = None,
    ) -> None:
        super().__init__(path)
        self.cwd = project_key(cwd)
        self.projects: dict[str, Project] = projects if projects is not None else {}

    # -- load / save ------------------------------------------------------------

    @classmethod
    def open(cls, path: Path, cwd: str | os.PathLike[str]) -> HarpoonStore:
        """Load the store from *path*; a missing file gives an empty store."""
        store = cls(path, cwd)
        store.projects = store._decode(store.load_raw())
        logger.debug(
            "opened harpoon store %s (%d project(s))", path, len(store.projects)
        )
        return store

    def save(self) -> None:
        """Serialize every project and overwrite the backing file."""
        self.save_raw(self.to_dict())

    def to_dict(self) -> dict:
        return {"projects": {root: p.to_dict() for root, p in self.projects.items()}}

    def _default(self) -> dict:
        return {"projects": {}}

    def _decode(self, data: dict | list) -> dict[str, Project]:
        try:
            if not isinstance(data, dict):
                raise ValueError("top level must be an object")
            raw_projects = data["projects"]
            if not isinstance(raw_projects, dict):
                raise ValueError("projects must be an object")
            return {
                root: Project.from_dict(value) for root, value in raw_projects.items()
            }
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise StoreDecodeError(
                f"corrupt harpoon store file {self.path}: {exc}"
            ) from exc

    # -- project table ----------------------------------------------------------

    def project(self, cwd: str | os.PathLike[str] | None = None) -> Project:
        """Table for *cwd* (default: the store's cwd), created if absent."""
        key = self.cwd if cwd is None else project_key(cwd)
        return self.projects.setdefault(key, Project())

    def set_file(self, index: int, record: FileRecord) -> None:
        self.project().files[index] = record

    def file(self, index: int) -> FileRecord | None:
        """Record at *index*, or None when absent or its path no longer exists.

        Stale records are filtered, not removed.
        """
        record = self.project().files.get(index)
        if record is None:
            return None
        if not resolve_path(record.path, self.cwd).exists():
            logger.debug("bookmark %d points at missing %s", index, record.path)
            return None
        return record

    def remove_file(self, index: int) -> FileRecord | None:
        return self.project().files.pop(index, None)
