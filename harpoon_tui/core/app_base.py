"""Shared application base class: the host contract the commands rely on."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .selection import Selection


class PromptEvent(enum.Enum):
    """What the command line is doing when a command is dispatched."""

    UPDATE = "update"  # text edited, live preview
    VALIDATE = "validate"  # Enter pressed
    ABORT = "abort"  # Escape pressed


@dataclass
class Document:
    """The active view's document as seen by the commands.

    ``path`` is None for a new, never-saved buffer.
    """

    path: Path | None
    selection: Selection


Job = Callable[["HarpoonHostBase"], None]


class HarpoonHostBase:
    """Base class providing the host hooks used by the command mixins.

    Frontends inherit from this alongside the mixins and implement the
    abstract methods.  ``_prefs`` and ``_store_path`` must be set before
    any command runs.
    """

    def __init__(self, **kwargs) -> None:  # type: ignore[no-untyped-def]
        # Cooperative MRO: propagate to next base (e.g. Textual App)
        super().__init__(**kwargs)

    # --- Abstract editor methods (subclasses MUST implement) ---

    def _current_document(self) -> Document:
        raise NotImplementedError

    def _current_working_dir(self) -> Path:
        raise NotImplementedError

    def _open_path(self, path: Path) -> None:
        """Open *path* in the current view, replacing its document."""
        raise NotImplementedError

    def _set_selection(self, selection: Selection) -> None:
        raise NotImplementedError

    def _recenter_view(self) -> None:
        """Scroll so the primary range sits in the middle of the view."""
        raise NotImplementedError

    # --- Abstract display methods ---

    def _update_status(self, text: str) -> None:
        raise NotImplementedError

    def _show_error(self, text: str) -> None:
        raise NotImplementedError

    def _push_popup(self, name: str, title: str, markdown: str) -> None:
        """Show a dismissible popup, replacing any open popup called *name*."""
        raise NotImplementedError

    def _schedule_job(self, job: Job) -> None:
        """Queue *job* to run after the current command returns."""
        raise NotImplementedError
