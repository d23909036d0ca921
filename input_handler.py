"""
Input Handler - Key dispatch and the termination dialog state machine
"""
import curses
import logging
from enum import Enum
from typing import Callable, List, Optional, Tuple

from config import CONFIRM_KEY, SIGNAL_NAME
from models import TerminationRequest

logger = logging.getLogger("procmon.input_handler")

NO_KEY = -1  # getch() timed out


class Action(Enum):
    QUIT = "quit"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    REFRESH = "refresh"
    INITIATE_KILL = "initiate_kill"
    NOOP = "noop"


KEY_ACTIONS = {
    ord('q'): Action.QUIT,
    ord('Q'): Action.QUIT,
    ord('r'): Action.REFRESH,
    ord('R'): Action.REFRESH,
    ord('k'): Action.INITIATE_KILL,
    ord('K'): Action.INITIATE_KILL,
    curses.KEY_UP: Action.MOVE_UP,
    curses.KEY_DOWN: Action.MOVE_DOWN,
}

# Actions that need at least one row to act on
ROW_ACTIONS = {Action.MOVE_UP, Action.MOVE_DOWN, Action.INITIATE_KILL}


def dispatch(key: int, count: int) -> Action:
    """
    Map a key code to an action

    Args:
        key: Key code from getch(), NO_KEY on timeout
        count: Number of rows in the current snapshot

    Returns:
        The Action to apply, NOOP for unbound keys
    """
    action = KEY_ACTIONS.get(key, Action.NOOP)
    if action in ROW_ACTIONS and count <= 0:
        return Action.NOOP
    return action


class DialogState(Enum):
    IDLE = "idle"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    SUBMITTING_SIGNAL = "submitting_signal"
    RESULT_DISPLAYED = "result_displayed"


SignalSender = Callable[[int], Tuple[bool, Optional[str]]]


class TerminationController:
    """Drives the confirm / submit / result dialog for killing a process"""

    def __init__(self, send_signal: SignalSender):
        self._send_signal = send_signal
        self.state = DialogState.IDLE
        self.request: Optional[TerminationRequest] = None
        self.result_lines: List[str] = []

    @property
    def is_modal(self) -> bool:
        """True while the dialog owns keyboard input"""
        return self.state in (DialogState.AWAITING_CONFIRMATION, DialogState.RESULT_DISPLAYED)

    def begin(self, request: TerminationRequest):
        """Open the confirmation dialog for a process"""
        if self.state is not DialogState.IDLE:
            return
        self.request = request
        self.result_lines = []
        self.state = DialogState.AWAITING_CONFIRMATION

    def handle_key(self, key: int) -> bool:
        """
        Feed a key to the dialog

        Args:
            key: Key code from getch(); NO_KEY is ignored

        Returns:
            True if a signal was just submitted
        """
        if key == NO_KEY:
            return False

        if self.state is DialogState.AWAITING_CONFIRMATION:
            if key == ord(CONFIRM_KEY):
                self._submit()
                return True
            logger.debug("termination of pid %d cancelled", self.request.pid)
            self._reset()

        elif self.state is DialogState.RESULT_DISPLAYED:
            self._reset()

        return False

    def _submit(self):
        self.state = DialogState.SUBMITTING_SIGNAL
        pid = self.request.pid
        success, error = self._send_signal(pid)

        if success:
            self.result_lines = [f"Successfully sent {SIGNAL_NAME} to PID {pid}"]
        else:
            self.result_lines = [
                f"Failed to send {SIGNAL_NAME} to PID {pid}",
                f"Error: {error or 'unknown error'}",
            ]
        self.state = DialogState.RESULT_DISPLAYED

    def _reset(self):
        self.state = DialogState.IDLE
        self.request = None
        self.result_lines = []

    def dialog_lines(self) -> List[str]:
        """Lines for the renderer to draw inside the dialog box"""
        if self.state is DialogState.AWAITING_CONFIRMATION:
            return [
                f"Terminate process: PID {self.request.pid}",
                f"Name: {self.request.name}",
                "-" * 30,
                f"1. {SIGNAL_NAME}",
                "2. Cancel",
                "Select option [1-2]: ",
            ]
        if self.state is DialogState.RESULT_DISPLAYED:
            return self.result_lines + ["", "Press any key to continue..."]
        return []
