"""Unit tests for PDF text line grouping."""

import pytest

from vitae.utils.pdf_processing import group_into_lines


def _char(text, x0, top):
    return {"text": text, "x0": x0, "top": top}


@pytest.mark.unit
def test_group_into_lines_orders_top_to_bottom_and_left_to_right():
    chars = [
        _char("b", 20.0, 100.0),
        _char("Y", 10.0, 50.0),
        _char("a", 10.0, 101.5),
        _char("X", 0.0, 50.0),
    ]

    assert group_into_lines(chars) == ["XY", "ab"]


@pytest.mark.unit
def test_group_into_lines_splits_beyond_tolerance():
    chars = [_char("a", 0.0, 10.0), _char("b", 5.0, 14.0)]

    assert group_into_lines(chars, tolerance=3.0) == ["a", "b"]
    assert group_into_lines(chars, tolerance=5.0) == ["ab"]


@pytest.mark.unit
def test_group_into_lines_empty():
    assert group_into_lines([]) == []
