"""
Process Manager - Collects process table snapshots and delivers signals
"""
import errno
import logging
import os
import signal
import time
from typing import Callable, List, Optional, Tuple

import psutil

from config import INITIAL_CAPACITY, PROC_ROOT
from models import MemorySample, ProcessRecord, Snapshot
from system_reader import is_pid_entry, read_memory, read_process

logger = logging.getLogger("procmon.process_manager")


class RecordBuffer:
    """Growable record storage that doubles its capacity when full"""

    def __init__(self, initial_capacity: int = INITIAL_CAPACITY):
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be positive")
        self._slots: List[Optional[ProcessRecord]] = [None] * initial_capacity
        self._size = 0
        self.reallocations = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def append(self, record: ProcessRecord):
        if self._size >= len(self._slots):
            self._slots.extend([None] * len(self._slots))
            self.reallocations += 1
        self._slots[self._size] = record
        self._size += 1

    def freeze(self) -> Tuple[ProcessRecord, ...]:
        """Return the stored records, in insertion order"""
        return tuple(self._slots[:self._size])


class SnapshotCollector:
    """Builds Snapshots by scanning the process namespace"""

    def __init__(self,
                 proc_root: str = PROC_ROOT,
                 initial_capacity: int = INITIAL_CAPACITY,
                 clock: Callable[[], float] = time.monotonic):
        self.proc_root = proc_root
        self.initial_capacity = initial_capacity
        self._clock = clock
        self.last_buffer: Optional[RecordBuffer] = None

    def list_pids(self) -> List[int]:
        """
        List candidate process IDs in discovery order

        Raises:
            OSError: If the namespace cannot be listed
        """
        return [int(entry) for entry in os.listdir(self.proc_root) if is_pid_entry(entry)]

    def collect(self) -> Tuple[Optional[Snapshot], Optional[str]]:
        """
        Take a snapshot of every readable process

        Processes that vanish or deny access between listing and reading are
        skipped; only a failure to list the namespace itself is reported.

        Returns:
            Tuple of (Snapshot, error message if the scan failed)
        """
        try:
            pids = self.list_pids()
        except OSError as e:
            message = f"Cannot read {self.proc_root}: {e.strerror or e}"
            logger.warning("process scan failed: %s", message)
            return None, message

        buffer = RecordBuffer(self.initial_capacity)
        skipped = 0
        for pid in pids:
            record = read_process(pid, self.proc_root)
            if record is None:
                skipped += 1
                continue
            buffer.append(record)

        self.last_buffer = buffer
        logger.debug("collected %d processes (%d skipped, %d reallocations)",
                     len(buffer), skipped, buffer.reallocations)

        return Snapshot(
            records=buffer.freeze(),
            captured_at=self._clock(),
            memory=self.collect_memory(),
        ), None

    def collect_memory(self) -> MemorySample:
        """Read memory counters, zero-filled when the source is unavailable"""
        sample = read_memory(self.proc_root)
        if sample is None:
            return MemorySample()
        return sample


def send_terminate_signal(pid: int) -> Tuple[bool, Optional[str]]:
    """
    Send SIGTERM to a process

    Args:
        pid: Process ID

    Returns:
        Tuple of (success, OS error description if any)
    """
    try:
        psutil.Process(pid).send_signal(signal.SIGTERM)
        logger.info("sent SIGTERM to pid %d", pid)
        return True, None

    except psutil.NoSuchProcess:
        error = os.strerror(errno.ESRCH)
    except psutil.AccessDenied:
        error = os.strerror(errno.EPERM)
    except OSError as e:
        error = e.strerror or str(e)

    logger.warning("failed to send SIGTERM to pid %d: %s", pid, error)
    return False, error
