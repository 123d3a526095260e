"""Persistence layer – each store owns its file path, data format, and I/O."""

from .harpoon import FileRecord, HarpoonStore, Project

__all__ = [
    "FileRecord",
    "HarpoonStore",
    "Project",
]
