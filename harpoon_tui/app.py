"""Main harpoon-tui application."""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Input, Static

from .core.app_base import Document, HarpoonHostBase, Job, PromptEvent
from .core.commands import HarpoonCommandsMixin
from .core.errors import NoBackingPath
from .core.selection import Selection
from .log import logger
from .platform import current_working_dir
from .preferences import Preferences, load_preferences
from .widgets import EditorArea, HarpoonListScreen

_APP_CSS = """\
Screen {
    background: $background;
}

#editor {
    height: 1fr;
}

#command-input {
    dock: bottom;
    height: 3;
    border-top: solid $accent;
}

#status-bar {
    dock: bottom;
    height: 1;
    background: $panel;
    color: $text-muted;
    padding: 0 1;
}

#status-bar.error {
    color: $error;
}
"""

HELP_TEXT = (
    "/harpoon-set N  /harpoon-get N  /harpoon-remove N  "
    "/harpoon-update  /harpoon-list  /open PATH  /write  /quit"
)


class HarpoonApp(HarpoonCommandsMixin, HarpoonHostBase, App):
    """A single-view editor with numbered, per-project file bookmarks."""

    CSS = _APP_CSS
    TITLE = "harpoon"

    BINDINGS = [
        Binding("ctrl+o", "focus_command", "Command", show=True),
        Binding("ctrl+s", "save_document", "Save", show=True),
        Binding("escape", "focus_editor", "Editor", show=False),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        path: Path | None = None,
        prefs: Preferences | None = None,
        store_path: Path | None = None,
        cwd: Path | None = None,
    ) -> None:
        super().__init__()
        self._initial_path = path
        self._prefs = prefs or load_preferences()
        self._store_path = store_path or self._prefs.store_path()
        self._cwd = cwd
        self._document_path: Path | None = None
        self._status_text = ""

    # ── Layout ──────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        self._editor = EditorArea("", id="editor", show_line_numbers=True)
        self._command_input = Input(placeholder="/harpoon-list", id="command-input")
        self._status_bar = Static("", id="status-bar", markup=False)
        with Vertical(id="main"):
            yield self._editor
            yield self._command_input
            yield self._status_bar

    def on_mount(self) -> None:
        if self._initial_path is not None:
            self._open_initial(self._initial_path)
        self._editor.focus()

    def _open_initial(self, path: Path) -> None:
        path = path.absolute()
        if path.exists():
            try:
                self._open_path(path)
            except (OSError, UnicodeDecodeError) as exc:
                self._show_error(f"cannot open {path}: {exc}")
            return
        # New file: empty buffer that will be written on save
        self._document_path = path
        self.sub_title = str(path)

    # ── Input Handling ──────────────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.value.startswith("/"):
            self._handle_command(event.value, PromptEvent.UPDATE)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        text = event.value.strip()
        event.input.clear()
        self._editor.focus()
        if text:
            self._handle_command(text)

    def _handle_command(
        self, text: str, event: PromptEvent = PromptEvent.VALIDATE
    ) -> None:
        """Route a slash command to the appropriate handler."""
        if self._handle_harpoon_command(text, event):
            return
        if event is not PromptEvent.VALIDATE:
            return

        parts = text.strip().split(None, 1)
        cmd = parts[0].lower()
        arg = parts[1].strip() if len(parts) > 1 else ""

        if cmd == "/open" and arg:
            path = Path(arg).expanduser()
            if not path.is_absolute():
                path = self._current_working_dir() / path
            try:
                self._open_path(path)
            except (OSError, UnicodeDecodeError) as exc:
                self._show_error(f"cannot open {arg}: {exc}")
        elif cmd in ("/write", "/w"):
            self.action_save_document()
        elif cmd == "/help":
            self._update_status(HELP_TEXT)
        elif cmd in ("/quit", "/q"):
            self.exit()
        else:
            self._show_error(f"Unknown command: {cmd}")

    # ── Actions ─────────────────────────────────────────────────

    def action_focus_command(self) -> None:
        self._command_input.focus()

    def action_focus_editor(self) -> None:
        if isinstance(self.screen, HarpoonListScreen):
            return
        command = self._command_input
        if command.has_focus:
            self._handle_command(command.value, PromptEvent.ABORT)
            command.clear()
        self._editor.focus()

    def action_save_document(self) -> None:
        if self._document_path is None:
            self._show_error(str(NoBackingPath()))
            return
        try:
            self._document_path.write_text(self._editor.text, encoding="utf-8")
        except OSError as exc:
            self._show_error(f"cannot write {self._document_path}: {exc}")
            return
        self._update_status(f"Wrote {self._document_path}")

    # ── Host hooks ──────────────────────────────────────────────

    def _current_document(self) -> Document:
        return Document(self._document_path, self._editor.get_offset_selection())

    def _current_working_dir(self) -> Path:
        return self._cwd or current_working_dir()

    def _open_path(self, path: Path) -> None:
        text = path.read_text(encoding="utf-8")
        self._editor.load_document(text)
        self._document_path = path
        self.sub_title = str(path)

    def _set_selection(self, selection: Selection) -> None:
        self._editor.set_offset_selection(selection)

    def _recenter_view(self) -> None:
        self._editor.scroll_cursor_visible(center=True)

    def _update_status(self, text: str) -> None:
        self._status_text = text
        self._status_bar.remove_class("error")
        self._status_bar.update(text)

    def _show_error(self, text: str) -> None:
        self._status_text = text
        self._status_bar.add_class("error")
        self._status_bar.update(text)

    def _push_popup(self, name: str, title: str, markdown: str) -> None:
        if isinstance(self.screen, HarpoonListScreen) and self.screen.name == name:
            self.pop_screen()
        self.push_screen(HarpoonListScreen(name, title, markdown))

    def _schedule_job(self, job: Job) -> None:
        self.call_later(job, self)


def run_app(
    path: Path | None = None,
    prefs: Preferences | None = None,
    store_path: Path | None = None,
) -> None:
    """Create and run the application."""
    app = HarpoonApp(path=path, prefs=prefs, store_path=store_path)
    logger.debug("starting harpoon-tui (store=%s)", app._store_path)
    app.run()
