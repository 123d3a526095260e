"""Textual widgets for harpoon-tui."""

from .editor import EditorArea
from .screens import HarpoonListScreen

__all__ = [
    "EditorArea",
    "HarpoonListScreen",
]
