"""Exceptions raised by the harpoon store and commands."""

from __future__ import annotations


class HarpoonError(Exception):
    """Base class; the message is shown to the user as a single line."""


# -- command arguments / editor state -----------------------------------------


class CommandError(HarpoonError):
    pass


class MissingArgument(CommandError):
    def __init__(self, message: str = "index not provided") -> None:
        super().__init__(message)


class InvalidIndex(CommandError):
    def __init__(self, message: str = "index must be an integer") -> None:
        super().__init__(message)


class NoBackingPath(CommandError):
    def __init__(self, message: str = "current document has no path") -> None:
        super().__init__(message)


# -- backing file --------------------------------------------------------------


class StoreError(HarpoonError):
    pass


class StoreReadError(StoreError):
    pass


class StoreDecodeError(StoreError):
    pass


class StoreWriteError(StoreError):
    pass


class StoreEncodeError(StoreError):
    pass


class BookmarkNotFound(HarpoonError):
    """Nothing stored at the requested index.  Informational, not fatal."""

    def __init__(self, index: int) -> None:
        super().__init__(f"no bookmark at index {index}")
        self.index = index
