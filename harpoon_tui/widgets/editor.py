"""Editor widget: a TextArea that speaks character offsets."""

from __future__ import annotations

from textual.widgets import TextArea
from textual.widgets.text_area import Selection as TextSelection

from ..core.selection import Range, Selection


class EditorArea(TextArea):
    """TextArea with offset <-> (row, column) conversion.

    TextArea shows a single range.  When a multi-range selection is
    restored, the full selection is remembered and reported back for as
    long as the visible range is still its primary range.
    """

    def __init__(self, *args, **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(*args, **kwargs)
        self._restored: Selection | None = None

    # -- offsets ----------------------------------------------------------------

    def offset_of(self, location: tuple[int, int]) -> int:
        row, column = location
        lines = self.document.lines
        row = max(0, min(row, len(lines) - 1))
        column = max(0, min(column, len(lines[row])))
        return sum(len(line) + 1 for line in lines[:row]) + column

    def location_of(self, offset: int) -> tuple[int, int]:
        """Clamped to the end of the document."""
        lines = self.document.lines
        remaining = max(0, offset)
        for row, line in enumerate(lines):
            if remaining <= len(line):
                return row, remaining
            remaining -= len(line) + 1
        return len(lines) - 1, len(lines[-1])

    # -- selection --------------------------------------------------------------

    def get_offset_selection(self) -> Selection:
        visible = Range(
            self.offset_of(self.selection.start), self.offset_of(self.selection.end)
        )
        restored = self._restored
        if restored is not None and restored.primary() == visible:
            return restored
        return Selection((visible,))

    def set_offset_selection(self, selection: Selection) -> None:
        primary = selection.primary()
        self.selection = TextSelection(
            self.location_of(primary.anchor), self.location_of(primary.head)
        )
        self._restored = selection

    def load_document(self, text: str) -> None:
        self._restored = None
        self.load_text(text)
