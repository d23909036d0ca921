"""
Configuration file for Console Process Monitor
"""

# Data sources
PROC_ROOT = "/proc"  # pseudo-filesystem holding <pid>/status and meminfo

# Refresh timing
REFRESH_INTERVAL = 3.0  # seconds between process table snapshots
MIN_REFRESH_INTERVAL = 0.5  # lower bound accepted from the command line
INPUT_TIMEOUT_MS = 100  # getch() timeout, doubles as the scheduler tick

# Snapshot collection
INITIAL_CAPACITY = 128  # records preallocated before the first doubling
PROC_NAME_MAX = 128  # names are truncated to PROC_NAME_MAX - 1 characters
NAME_PLACEHOLDER = "?"
STATE_PLACEHOLDER = "?"

# Screen layout
MEMORY_SUMMARY_ROWS = 3  # Mem / Swap / Avail lines at the top
HEADER_ROW = 4
SEPARATOR_ROW = 5
FIRST_PROCESS_ROW = 6
RESERVED_ROWS = 8  # everything that is not a process row

# Process display columns
COLUMN_WIDTHS = {
    'pid': 8,
    'name': 22,
    'state': 6,
    'memory': 12,
}
COLUMN_TITLES = {
    'pid': 'PID',
    'name': 'NAME',
    'state': 'STATE',
    'memory': 'MEM (KB)',
}

# Color pairs
COLOR_NORMAL = 1
COLOR_ERROR = 2
COLOR_HEADER = 3
COLOR_CONTROLS = 4

# Controls
CONTROLS = [
    ('Q', 'Quit'),
    ('↑↓', 'Navigate'),
    ('K', 'Kill'),
    ('R', 'Refresh'),
]

# Termination dialog
DIALOG_WIDTH = 50
DIALOG_HEIGHT = 8
CONFIRM_KEY = '1'
SIGNAL_NAME = "SIGTERM"

# Logging
LOGGER_NAME = "procmon"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
DEFAULT_LOG_LEVEL = "INFO"
