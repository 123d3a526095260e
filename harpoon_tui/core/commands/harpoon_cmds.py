"""Harpoon commands: pin numbered slots to file locations and jump back."""

from __future__ import annotations

import re
from typing import Callable

from ..app_base import PromptEvent
from ..errors import (
    BookmarkNotFound,
    HarpoonError,
    InvalidIndex,
    MissingArgument,
    NoBackingPath,
)
from ..paths import normalize_path, resolve_path
from ..persistence import FileRecord, HarpoonStore, Project
from ...log import logger

POPUP_NAME = "harpoon"
EMPTY_LISTING = "No bookmarks in this project."

_MD_SPECIAL = re.compile(r"([\\`*_\[\]<>#|])")


def _escape_markdown(text: str) -> str:
    return _MD_SPECIAL.sub(r"\\\1", text)


def parse_index(args: list[str]) -> int:
    """Parse the slot index from the first argument."""
    if not args:
        raise MissingArgument()
    text = args[0].strip()
    if not text.isascii() or not text.isdigit():
        raise InvalidIndex()
    return int(text)


def format_listing(project: Project) -> str:
    """``"{index}. {path}"`` per record, sorted by index."""
    return "\n".join(f"{index}. {record.path}" for index, record in project.sorted_files())


def listing_markdown(title: str, project: Project) -> str:
    """Markdown for the list popup.

    The period after the index is escaped so sparse indices are shown
    as-is instead of being renumbered as an ordered list.
    """
    lines = [f"# {title}", ""]
    if not project.files:
        lines.append(EMPTY_LISTING)
    for index, record in project.sorted_files():
        lines.append(f"- {index}\\. {_escape_markdown(record.path)}")
    return "\n".join(lines) + "\n"


class HarpoonCommandsMixin:
    """The /harpoon-* commands.

    Each command loads the store, applies one change and, if something
    changed, writes it back.  Commands only run on ``PromptEvent.VALIDATE``.
    """

    def _harpoon_commands(self) -> dict[str, Callable[[list[str], PromptEvent], None]]:
        return {
            "/harpoon-set": self._cmd_harpoon_set,
            "/harpoon-get": self._cmd_harpoon_get,
            "/harpoon-remove": self._cmd_harpoon_remove,
            "/harpoon-update": self._cmd_harpoon_update,
            "/harpoon-list": self._cmd_harpoon_list,
        }

    def _handle_harpoon_command(
        self, text: str, event: PromptEvent = PromptEvent.VALIDATE
    ) -> bool:
        """Run a /harpoon-* command.  Returns False if *text* isn't one."""
        parts = text.strip().split()
        if not parts:
            return False
        handler = self._harpoon_commands().get(parts[0].lower())
        if handler is None:
            return False
        try:
            handler(parts[1:], event)
        except BookmarkNotFound as exc:
            self._update_status(str(exc))
        except HarpoonError as exc:
            logger.debug("%s failed: %s", parts[0], exc)
            self._show_error(str(exc))
        return True

    def _open_harpoon_store(self) -> HarpoonStore:
        return HarpoonStore.open(self._store_path, self._current_working_dir())

    # ── Commands ─────────────────────────────────────────────────

    def _cmd_harpoon_set(self, args: list[str], event: PromptEvent) -> None:
        """Pin the current file and selection to slot *index*."""
        if event is not PromptEvent.VALIDATE:
            return
        index = parse_index(args)
        doc = self._current_document()
        if doc.path is None:
            raise NoBackingPath()

        store = self._open_harpoon_store()
        path = normalize_path(doc.path, store.cwd)
        store.set_file(index, FileRecord.new(path, doc.selection))
        store.save()
        self._update_status(f"Harpooned {path} to {index}")

    def _cmd_harpoon_get(self, args: list[str], event: PromptEvent) -> None:
        """Open slot *index* and restore its selection.

        An empty slot, or one whose file is gone, is a silent no-op.
        """
        if event is not PromptEvent.VALIDATE:
            return
        index = parse_index(args)
        store = self._open_harpoon_store()
        record = store.file(index)
        if record is None:
            return

        try:
            self._open_path(resolve_path(record.path, store.cwd))
        except (OSError, UnicodeDecodeError) as exc:
            raise HarpoonError(f"cannot open {record.path}: {exc}") from exc
        self._set_selection(record.as_selection())
        if self._prefs.navigation.recenter:
            self._recenter_view()

    def _cmd_harpoon_remove(self, args: list[str], event: PromptEvent) -> None:
        if event is not PromptEvent.VALIDATE:
            return
        index = parse_index(args)
        store = self._open_harpoon_store()
        record = store.remove_file(index)
        if record is None:
            raise BookmarkNotFound(index)
        store.save()
        self._update_status(f"Removed {record.path} from {index}")

    def _cmd_harpoon_update(self, args: list[str], event: PromptEvent) -> None:
        """Refresh the selection of the slot holding the current file.

        Files that aren't bookmarked yet are left alone.
        """
        if event is not PromptEvent.VALIDATE:
            return
        doc = self._current_document()
        if doc.path is None:
            return

        store = self._open_harpoon_store()
        match = store.project().find_by_path(normalize_path(doc.path, store.cwd))
        if match is None:
            return
        index, record = match
        record.update_selection(doc.selection)
        store.save()
        self._update_status(f"Updated {record.path} at {index}")

    def _cmd_harpoon_list(self, args: list[str], event: PromptEvent) -> None:
        if event is not PromptEvent.VALIDATE:
            return
        project = self._open_harpoon_store().project()
        title = self._prefs.listing.title
        markdown = listing_markdown(title, project)

        def show_popup(host) -> None:  # type: ignore[no-untyped-def]
            host._push_popup(POPUP_NAME, title, markdown)

        self._schedule_job(show_popup)
