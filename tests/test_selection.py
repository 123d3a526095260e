"""Tests for the selection codec."""

from __future__ import annotations

import pytest

from harpoon_tui.core.selection import (
    Range,
    Selection,
    Span,
    selection_from_spans,
    spans_from_selection,
)


class TestSelection:
    def test_empty_selection_rejected(self):
        with pytest.raises(ValueError):
            Selection(())

    def test_primary_index_out_of_bounds(self):
        with pytest.raises(ValueError):
            Selection((Range(0, 1),), primary_index=1)

    def test_single_cursor(self):
        sel = Selection.single(4)
        assert sel.ranges == (Range(4, 4),)
        assert sel.primary() == Range(4, 4)

    def test_range_start_end_ignore_direction(self):
        backwards = Range(anchor=9, head=2)
        assert backwards.start == 2
        assert backwards.end == 9


class TestCodec:
    def test_one_span_per_range_in_order(self):
        sel = Selection((Range(3, 7), Range(10, 2), Range(5, 5)))
        assert spans_from_selection(sel) == [Span(3, 7), Span(10, 2), Span(5, 5)]

    def test_anchor_and_head_preserved(self):
        spans = spans_from_selection(Selection.single(12, 4))
        assert spans == [Span(start=12, end=4)]

    def test_round_trip_resets_primary_to_first(self):
        sel = Selection((Range(1, 2), Range(8, 6)), primary_index=1)
        restored = selection_from_spans(spans_from_selection(sel))
        assert restored.ranges == sel.ranges
        assert restored.primary_index == 0

    def test_round_trip_identity(self):
        sel = Selection((Range(3, 7), Range(20, 11)))
        assert selection_from_spans(spans_from_selection(sel)) == sel


class TestSpanDict:
    def test_to_dict(self):
        assert Span(3, 7).to_dict() == {"start": 3, "end": 7}

    def test_from_dict(self):
        assert Span.from_dict({"start": 0, "end": 12}) == Span(0, 12)

    @pytest.mark.parametrize(
        "data",
        [
            {"start": -1, "end": 2},
            {"start": "1", "end": 2},
            {"start": 1.5, "end": 2},
            {"start": True, "end": 2},
        ],
    )
    def test_from_dict_rejects_bad_offsets(self, data):
        with pytest.raises(ValueError):
            Span.from_dict(data)

    def test_from_dict_missing_key(self):
        with pytest.raises(KeyError):
            Span.from_dict({"start": 1})
