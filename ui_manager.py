"""
UI Manager - Handles all user interface operations using curses
"""
import curses
from typing import List, Optional

from config import (
    COLOR_CONTROLS,
    COLOR_ERROR,
    COLOR_HEADER,
    COLOR_NORMAL,
    COLUMN_TITLES,
    COLUMN_WIDTHS,
    CONTROLS,
    DIALOG_HEIGHT,
    DIALOG_WIDTH,
    FIRST_PROCESS_ROW,
    HEADER_ROW,
    INPUT_TIMEOUT_MS,
    SEPARATOR_ROW,
)
from layout import Viewport, visible_capacity
from models import MemorySample, SelectionState, Snapshot


def format_row(pid, name, state, memory) -> str:
    """Lay out one table row in the fixed-width, left-justified columns"""
    return (
        f"{str(pid):<{COLUMN_WIDTHS['pid']}} "
        f"{str(name)[:COLUMN_WIDTHS['name']]:<{COLUMN_WIDTHS['name']}} "
        f"{str(state):<{COLUMN_WIDTHS['state']}} "
        f"{str(memory):<{COLUMN_WIDTHS['memory']}}"
    )


def format_memory_summary(memory: MemorySample) -> List[str]:
    """Memory summary lines shown above the process table"""
    return [
        f"Mem:   {memory.used_mb} MB used / {memory.total_mb} MB total",
        f"Swap:  {memory.swap_used_mb} MB used / {memory.swap_total_mb} MB total",
        f"Avail: {memory.available_mb} MB",
    ]


class UIManager:
    """Manages the console user interface"""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.height, self.width = stdscr.getmaxyx()

        # Initialize colors
        if curses.has_colors():
            curses.init_pair(COLOR_NORMAL, curses.COLOR_WHITE, curses.COLOR_BLACK)
            curses.init_pair(COLOR_ERROR, curses.COLOR_RED, curses.COLOR_BLACK)
            curses.init_pair(COLOR_HEADER, curses.COLOR_BLACK, curses.COLOR_WHITE)
            curses.init_pair(COLOR_CONTROLS, curses.COLOR_BLACK, curses.COLOR_GREEN)

        # Configure curses
        try:
            curses.curs_set(0)  # Hide cursor
        except curses.error:
            pass  # Terminal cannot hide the cursor
        self.stdscr.keypad(1)
        self.stdscr.timeout(INPUT_TIMEOUT_MS)

    def update_size(self):
        """Re-read terminal dimensions (after KEY_RESIZE or any redraw)"""
        self.height, self.width = self.stdscr.getmaxyx()

    def get_display_area_height(self) -> int:
        """Rows available for the process list"""
        return visible_capacity(self.height)

    def _put(self, y: int, text: str, attr: int = 0):
        if y < 0 or y >= self.height or self.width <= 1:
            return
        try:
            self.stdscr.addstr(y, 0, text[:self.width-1].ljust(self.width-1), attr)
        except curses.error:
            pass

    def _color(self, pair: int) -> int:
        return curses.color_pair(pair) if curses.has_colors() else 0

    def draw(self, snapshot: Snapshot, state: SelectionState, viewport: Viewport,
             error_message: Optional[str] = None, dialog_lines: Optional[List[str]] = None):
        """Draw one full frame"""
        self.update_size()
        self.stdscr.erase()

        self.draw_memory_summary(snapshot.memory)
        self.draw_header()
        self.draw_process_list(snapshot, state, viewport)
        self.draw_status(snapshot, state, error_message)
        self.draw_controls()
        self.stdscr.noutrefresh()

        if dialog_lines:
            self.draw_dialog(dialog_lines)

        curses.doupdate()

    def draw_memory_summary(self, memory: MemorySample):
        for y, line in enumerate(format_memory_summary(memory)):
            self._put(y, line, self._color(COLOR_NORMAL))

    def draw_header(self):
        """Draw the header with column titles and the separator below it"""
        header = format_row(COLUMN_TITLES['pid'], COLUMN_TITLES['name'],
                            COLUMN_TITLES['state'], COLUMN_TITLES['memory'])
        self._put(HEADER_ROW, header, self._color(COLOR_HEADER))
        self._put(SEPARATOR_ROW, "-" * self.width)

    def draw_process_list(self, snapshot: Snapshot, state: SelectionState, viewport: Viewport):
        """
        Draw the rows selected by the viewport

        Args:
            snapshot: Current snapshot
            state: Selection state, the selected row is shown in reverse video
            viewport: Slice of the snapshot to draw
        """
        for i in range(viewport.visible_count):
            process_index = viewport.start_index + i
            record = snapshot[process_index]
            line = format_row(record.pid, record.name, record.state, record.memory_kb)

            attr = curses.A_REVERSE if process_index == state.index else self._color(COLOR_NORMAL)
            self._put(FIRST_PROCESS_ROW + i, line, attr)

    def draw_status(self, snapshot: Snapshot, state: SelectionState, error_message: Optional[str] = None):
        """Draw the status line: process count, selection and any scan error"""
        if len(snapshot):
            status = f"Processes: {len(snapshot)} | Selected {state.index + 1}"
        else:
            status = "Processes: 0"

        attr = self._color(COLOR_NORMAL)
        if error_message:
            status = f"{status} | {error_message}"
            attr = self._color(COLOR_ERROR)
        self._put(self.height - 2, status, attr)

    def draw_controls(self):
        """Draw the key hints at the bottom"""
        control_text = "  ".join([f"{key}:{desc}" for key, desc in CONTROLS])
        self._put(self.height - 1, control_text, self._color(COLOR_CONTROLS))

    def draw_dialog(self, lines: List[str]):
        """
        Draw a boxed dialog in the center of the screen

        Args:
            lines: Content lines to display
        """
        box_height = min(max(DIALOG_HEIGHT, len(lines) + 2), self.height)
        box_width = min(DIALOG_WIDTH, self.width)
        if box_height < 3 or box_width < 5:
            return

        start_y = (self.height - box_height) // 2
        start_x = (self.width - box_width) // 2

        try:
            win = curses.newwin(box_height, box_width, start_y, start_x)
            win.box()
            for i, line in enumerate(lines[:box_height-2]):
                win.addstr(i + 1, 2, line[:box_width-4])
            win.noutrefresh()

        except curses.error:
            pass

    def clear(self):
        """Clear the screen"""
        self.stdscr.clear()

    def get_input(self) -> int:
        """Get user input, -1 once the poll timeout expires"""
        return self.stdscr.getch()
