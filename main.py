"""
Console Process Monitor
A top-like process monitor for Linux terminals
"""
import argparse
import curses
import logging
import sys
import time

from config import (
    DEFAULT_LOG_LEVEL,
    INITIAL_CAPACITY,
    MIN_REFRESH_INTERVAL,
    PROC_ROOT,
    REFRESH_INTERVAL,
)
from input_handler import Action, NO_KEY, TerminationController, dispatch
from layout import compute_viewport
from logging_setup import setup_logging
from models import SelectionState, Snapshot, TerminationRequest
from process_manager import SnapshotCollector, send_terminate_signal
from scheduler import RefreshScheduler
from ui_manager import UIManager

logger = logging.getLogger("procmon.main")


class ProcessMonitor:
    """Main application controller"""

    def __init__(self, ui, collector: SnapshotCollector, scheduler: RefreshScheduler,
                 controller: TerminationController, clock=time.monotonic):
        self.ui = ui
        self.collector = collector
        self.scheduler = scheduler
        self.controller = controller
        self.clock = clock
        self.state = SelectionState()
        self.snapshot = Snapshot()
        self.error_message = None

    def refresh_if_due(self):
        """Take a new snapshot when the scheduler says so"""
        if not self.scheduler.due(self.state, self.clock()):
            return
        self.state.refresh_requested = False

        snapshot, error = self.collector.collect()
        if error:
            # Keep showing the last good snapshot until a scan succeeds
            self.error_message = error
            return

        if self.error_message:
            logger.info("process scan recovered")
        self.error_message = None
        self.snapshot = snapshot

    def draw(self):
        """Clamp the selection to the installed snapshot and render it"""
        count = len(self.snapshot)
        self.state.clamp(count)
        viewport = compute_viewport(count, self.ui.get_display_area_height(), self.state.index)

        dialog_lines = self.controller.dialog_lines() if self.controller.is_modal else None
        self.ui.draw(self.snapshot, self.state, viewport, self.error_message, dialog_lines)

    def handle_input_key(self, key: int):
        """Route a single key press to the dialog or the main dispatcher"""
        if self.controller.is_modal:
            if self.controller.handle_key(key):
                self.state.refresh_requested = True
            return

        if key == curses.KEY_RESIZE:
            self.ui.clear()
            return

        count = len(self.snapshot)
        action = dispatch(key, count)

        if action is Action.QUIT:
            self.state.quit_requested = True
        elif action is Action.MOVE_UP:
            self.state.move(-1, count)
        elif action is Action.MOVE_DOWN:
            self.state.move(1, count)
        elif action is Action.REFRESH:
            self.state.refresh_requested = True
        elif action is Action.INITIATE_KILL:
            self.kill_process()

    def kill_process(self):
        """Open the confirmation dialog for the selected process"""
        if not len(self.snapshot):
            return

        selected_process = self.snapshot[self.state.index]
        self.controller.begin(TerminationRequest(pid=selected_process.pid, name=selected_process.name))

    def run(self):
        """Main loop: refresh, draw, then wait up to one poll tick for a key"""
        while not self.state.quit_requested:
            self.refresh_if_due()
            self.draw()

            key = self.ui.get_input()
            if key != NO_KEY:
                self.handle_input_key(key)


def build_parser():
    parser = argparse.ArgumentParser(
        description="procmon: terminal process monitor reading /proc"
    )
    parser.add_argument(
        "--interval",
        type=_validate_interval,
        default=REFRESH_INTERVAL,
        help="Seconds between process table refreshes (default: %(default)s)",
    )
    parser.add_argument(
        "--proc-root",
        default=PROC_ROOT,
        help="Location of the proc filesystem (default: %(default)s)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file (rotated); logging is off otherwise",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level for --log-file (default: %(default)s)",
    )
    return parser


def _validate_interval(value):
    try:
        interval = float(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(
            "invalid --interval value: {!r}".format(value)
        ) from error
    if interval < MIN_REFRESH_INTERVAL:
        raise argparse.ArgumentTypeError(
            "--interval must be at least {} seconds".format(MIN_REFRESH_INTERVAL)
        )
    return interval


def main(stdscr, args):
    """Main entry point"""
    app = ProcessMonitor(
        ui=UIManager(stdscr),
        collector=SnapshotCollector(proc_root=args.proc_root, initial_capacity=INITIAL_CAPACITY),
        scheduler=RefreshScheduler(args.interval),
        controller=TerminationController(send_terminate_signal),
    )
    app.run()


def cli(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file, args.log_level)
    logger.info("starting (interval=%.1fs, proc_root=%s)", args.interval, args.proc_root)
    try:
        curses.wrapper(main, args)
        return 0
    except KeyboardInterrupt:
        print("\nExiting...")
        return 130
    except curses.error as e:
        logger.exception("terminal error")
        print("Terminal error: {}".format(e), file=sys.stderr)
        return 1
    finally:
        logger.info("stopped")


if __name__ == "__main__":
    sys.exit(cli())
