"""Modal screen widgets for harpoon-tui."""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import ScrollableContainer, Vertical
from textual.screen import ModalScreen
from textual.widgets import Markdown, Static


class HarpoonListScreen(ModalScreen[None]):
    """Popup rendering markdown.  Any key closes it."""

    DEFAULT_CSS = """
    HarpoonListScreen {
        align: center middle;
    }
    #harpoon-popup {
        width: 60%;
        max-height: 70%;
        height: auto;
        border: round $accent;
        background: $surface;
        padding: 0 1;
    }
    #harpoon-popup-body {
        height: auto;
    }
    #harpoon-popup-hint {
        color: $text-muted;
    }
    """

    def __init__(self, name: str, title: str, markdown: str) -> None:
        super().__init__(name=name)
        self.popup_title = title
        self.markdown = markdown

    def compose(self) -> ComposeResult:
        with Vertical(id="harpoon-popup"):
            with ScrollableContainer(id="harpoon-popup-body"):
                yield Markdown(self.markdown, id="harpoon-markdown")
            yield Static("any key to close", id="harpoon-popup-hint")

    def on_mount(self) -> None:
        self.query_one("#harpoon-popup").border_title = self.popup_title

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.dismiss(None)
