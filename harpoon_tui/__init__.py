"""harpoon-tui: numbered, per-project file bookmarks for a terminal editor."""

__version__ = "0.1.0"
