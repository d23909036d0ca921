"""
Refresh Scheduler - Decides when a new snapshot is due
"""
from config import REFRESH_INTERVAL
from models import SelectionState


class RefreshScheduler:
    """Interval-based refresh gate with a manual override"""

    def __init__(self, interval: float = REFRESH_INTERVAL):
        self.interval = interval

    def due(self, state: SelectionState, now: float) -> bool:
        """
        Check whether a snapshot should be taken at `now`

        This query has a side effect: when it returns True it stores `now`
        in state.last_refresh. The caller must clear state.refresh_requested
        after acting on a True result.

        Args:
            state: Session state holding last_refresh and refresh_requested
            now: Current time.monotonic() value

        Returns:
            True if the interval elapsed or a refresh was requested
        """
        if state.refresh_requested or now - state.last_refresh >= self.interval:
            state.last_refresh = now
            return True
        return False
