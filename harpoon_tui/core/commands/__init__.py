"""Command handler mixins shared by every frontend."""

from .harpoon_cmds import HarpoonCommandsMixin  # noqa: F401

__all__ = [
    "HarpoonCommandsMixin",
]
