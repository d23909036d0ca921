"""
Data models for Console Process Monitor
"""
from dataclasses import dataclass, field
from typing import Iterator, Tuple


@dataclass(frozen=True)
class ProcessRecord:
    """One process as read from its status file"""
    pid: int
    name: str
    state: str
    memory_kb: int

    def __str__(self) -> str:
        return f"{self.pid:<8} {self.name:<22.22} {self.state:<6} {self.memory_kb:<12}"


@dataclass(frozen=True)
class MemorySample:
    """System memory counters in kilobytes"""
    total_kb: int = 0
    free_kb: int = 0
    available_kb: int = 0
    cached_kb: int = 0
    buffers_kb: int = 0
    swap_total_kb: int = 0
    swap_free_kb: int = 0

    @property
    def used_kb(self) -> int:
        return max(0, self.total_kb - self.free_kb - self.cached_kb)

    @property
    def swap_used_kb(self) -> int:
        return max(0, self.swap_total_kb - self.swap_free_kb)

    @property
    def total_mb(self) -> int:
        return self.total_kb // 1024

    @property
    def used_mb(self) -> int:
        return self.used_kb // 1024

    @property
    def available_mb(self) -> int:
        return self.available_kb // 1024

    @property
    def swap_total_mb(self) -> int:
        return self.swap_total_kb // 1024

    @property
    def swap_used_mb(self) -> int:
        return self.swap_used_kb // 1024


@dataclass(frozen=True)
class Snapshot:
    """
    One capture of the process table and memory counters

    Records keep the order in which process identifiers were discovered.
    """
    records: Tuple[ProcessRecord, ...] = ()
    captured_at: float = 0.0
    memory: MemorySample = field(default_factory=MemorySample)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ProcessRecord]:
        return iter(self.records)

    def __getitem__(self, index):
        return self.records[index]


@dataclass
class SelectionState:
    """Mutable per-session state threaded through the main loop"""
    index: int = 0
    quit_requested: bool = False
    refresh_requested: bool = True  # first iteration always collects
    last_refresh: float = 0.0

    def clamp(self, count: int):
        """Keep the index inside the current snapshot after its size changed"""
        if count <= 0:
            self.index = 0
        elif self.index >= count:
            self.index = count - 1

    def move(self, delta: int, count: int):
        """
        Move the selection, stopping at the first and last rows

        Args:
            delta: -1 for up, 1 for down
            count: Number of rows in the current snapshot
        """
        if count <= 0:
            return

        self.index = max(0, min(self.index + delta, count - 1))


@dataclass(frozen=True)
class TerminationRequest:
    """Target of the termination dialog"""
    pid: int
    name: str
