"""
Viewport layout for the scrolling process list
"""
from typing import NamedTuple

from config import RESERVED_ROWS


class Viewport(NamedTuple):
    start_index: int
    visible_count: int


def visible_capacity(screen_height: int) -> int:
    """Rows left for processes once header and footer rows are taken"""
    return max(0, screen_height - RESERVED_ROWS)


def compute_viewport(total_rows: int, capacity: int, selected_index: int) -> Viewport:
    """
    Compute which slice of the list is shown

    The list only scrolls once the selection would fall below the last
    visible row, and then keeps the selection on that last row.

    Args:
        total_rows: Number of rows in the snapshot
        capacity: Rows available on screen, negative values count as zero
        selected_index: Index of the highlighted row

    Returns:
        Viewport(start_index, visible_count)
    """
    capacity = max(0, capacity)
    if selected_index < capacity:
        start_index = 0
    else:
        start_index = selected_index - capacity + 1

    visible_count = max(0, min(capacity, total_rows - start_index))
    return Viewport(start_index, visible_count)
