"""Selection codec.

Converts between the editor's selection (an ordered set of ranges, each
with an anchor and a head offset) and the serializable span list stored
in the bookmark file.  Pure and stateless.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Range:
    """One selection range.  ``anchor`` stays put, ``head`` is the cursor."""

    anchor: int
    head: int

    @property
    def start(self) -> int:
        return min(self.anchor, self.head)

    @property
    def end(self) -> int:
        return max(self.anchor, self.head)


@dataclass(frozen=True)
class Selection:
    """Ordered ranges over a document with one designated primary range."""

    ranges: tuple[Range, ...]
    primary_index: int = 0

    def __post_init__(self) -> None:
        if not self.ranges:
            raise ValueError("a selection needs at least one range")
        if not 0 <= self.primary_index < len(self.ranges):
            raise ValueError(
                f"primary index {self.primary_index} out of bounds "
                f"for {len(self.ranges)} range(s)"
            )

    @classmethod
    def single(cls, anchor: int, head: int | None = None) -> Selection:
        """A selection with one range (a bare cursor when *head* is omitted)."""
        return cls((Range(anchor, anchor if head is None else head),))

    def primary(self) -> Range:
        return self.ranges[self.primary_index]


@dataclass(frozen=True)
class Span:
    """Serializable form of a range: ``start`` is the anchor, ``end`` the head."""

    start: int
    end: int

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, data: dict) -> Span:
        start = data["start"]
        end = data["end"]
        for value in (start, end):
            # bool is an int subclass; reject it explicitly
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"span offsets must be non-negative integers: {data!r}")
        return cls(start, end)


def spans_from_selection(selection: Selection) -> list[Span]:
    """One span per range, in range order."""
    return [Span(start=r.anchor, end=r.head) for r in selection.ranges]


def selection_from_spans(spans: list[Span]) -> Selection:
    """Inverse of :func:`spans_from_selection`; the primary range is the first."""
    return Selection(tuple(Range(s.start, s.end) for s in spans), primary_index=0)
