"""
System Reader - Parses process status and memory files from /proc
"""
import logging
import os
from typing import Dict, Iterable, Optional

from config import (
    NAME_PLACEHOLDER,
    PROC_NAME_MAX,
    PROC_ROOT,
    STATE_PLACEHOLDER,
)
from models import MemorySample, ProcessRecord

logger = logging.getLogger("procmon.system_reader")

# /proc/meminfo key -> MemorySample field
MEMINFO_FIELDS = {
    'MemTotal': 'total_kb',
    'MemFree': 'free_kb',
    'MemAvailable': 'available_kb',
    'Cached': 'cached_kb',
    'Buffers': 'buffers_kb',
    'SwapTotal': 'swap_total_kb',
    'SwapFree': 'swap_free_kb',
}


def is_pid_entry(entry: str) -> bool:
    """Check whether a /proc listing entry names a process"""
    if not entry or not entry.isascii() or not entry.isdigit():
        return False
    return int(entry) > 0


def _split_line(line: str):
    key, sep, value = line.partition(':')
    if not sep:
        return None, None
    return key.strip(), value


def _leading_int(value: str) -> Optional[int]:
    tokens = value.split()
    if not tokens:
        return None
    try:
        number = int(tokens[0])
    except ValueError:
        return None
    return number if number >= 0 else None


def _clean_name(value: str) -> str:
    name = value.strip().replace('\x00', '')
    return name[:PROC_NAME_MAX - 1]


def parse_status(pid: int, lines: Iterable[str]) -> ProcessRecord:
    """
    Build a ProcessRecord from the lines of a status file

    Only the first Name, State and VmRSS lines are used. Reading stops as
    soon as all three have been seen, so large status files are not consumed
    past the memory block.

    Args:
        pid: Process ID the lines belong to
        lines: Iterable of "Key:<whitespace>Value" lines

    Returns:
        ProcessRecord with placeholder values for missing fields
    """
    name = None
    state = None
    memory_kb = None

    for line in lines:
        key, value = _split_line(line)

        if key == 'Name' and name is None:
            name = _clean_name(value)
        elif key == 'State' and state is None:
            stripped = value.strip()
            if stripped:
                state = stripped[0]
        elif key == 'VmRSS' and memory_kb is None:
            memory_kb = _leading_int(value)

        if name is not None and state is not None and memory_kb is not None:
            break

    return ProcessRecord(
        pid=pid,
        name=NAME_PLACEHOLDER if name is None else name,
        state=STATE_PLACEHOLDER if state is None else state,
        memory_kb=0 if memory_kb is None else memory_kb,
    )


def parse_meminfo(lines: Iterable[str]) -> MemorySample:
    """Build a MemorySample from /proc/meminfo lines; unknown keys are ignored"""
    values: Dict[str, int] = {}

    for line in lines:
        key, value = _split_line(line)
        field_name = MEMINFO_FIELDS.get(key)
        if field_name is None or field_name in values:
            continue
        number = _leading_int(value)
        values[field_name] = 0 if number is None else number

    return MemorySample(**values)


def read_process(pid: int, proc_root: str = PROC_ROOT) -> Optional[ProcessRecord]:
    """
    Read one process from <proc_root>/<pid>/status

    Returns:
        ProcessRecord, or None if the process vanished or cannot be read
    """
    path = os.path.join(proc_root, str(pid), 'status')
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as status_file:
            return parse_status(pid, status_file)
    except OSError as e:
        logger.debug("skipping pid %d: %s", pid, e)
        return None


def read_memory(proc_root: str = PROC_ROOT) -> Optional[MemorySample]:
    """
    Read system memory counters from <proc_root>/meminfo

    Returns:
        MemorySample, or None if the file cannot be opened
    """
    path = os.path.join(proc_root, 'meminfo')
    try:
        with open(path, 'r', encoding='utf-8', errors='replace') as meminfo_file:
            return parse_meminfo(meminfo_file)
    except OSError as e:
        logger.warning("memory counters unavailable: %s", e)
        return None
