"""Tests for the scrolling viewport."""

import pytest

from config import RESERVED_ROWS
from layout import Viewport, compute_viewport, visible_capacity


def test_no_scroll_while_selection_fits():
    assert compute_viewport(50, 10, 0) == Viewport(0, 10)
    assert compute_viewport(50, 10, 9) == Viewport(0, 10)


def test_scroll_keeps_selection_on_last_row():
    viewport = compute_viewport(50, 10, 45)
    assert viewport.start_index == 36
    assert viewport.visible_count == 10


def test_selection_on_last_process():
    assert compute_viewport(50, 10, 49) == Viewport(40, 10)


@pytest.mark.parametrize("total", [1, 10, 50, 200])
@pytest.mark.parametrize("capacity", [1, 5, 10, 40])
def test_scroll_properties(total, capacity):
    for selected in range(total):
        viewport = compute_viewport(total, capacity, selected)
        if selected < capacity:
            assert viewport.start_index == 0
        else:
            assert viewport.start_index + capacity - 1 == selected
        assert viewport.start_index <= selected < viewport.start_index + viewport.visible_count


def test_short_list_shows_every_row():
    assert compute_viewport(3, 10, 2) == Viewport(0, 3)


def test_empty_list():
    assert compute_viewport(0, 10, 0) == Viewport(0, 0)


def test_zero_capacity_shows_nothing():
    assert compute_viewport(50, 0, 0).visible_count == 0
    assert compute_viewport(50, 0, 20).visible_count == 0


def test_negative_capacity_is_treated_as_zero():
    assert compute_viewport(50, -3, 5).visible_count == 0


def test_visible_capacity_subtracts_reserved_rows():
    assert visible_capacity(24) == 24 - RESERVED_ROWS
    assert visible_capacity(RESERVED_ROWS) == 0
    assert visible_capacity(3) == 0
