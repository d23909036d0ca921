import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


MEMINFO = """\
MemTotal:       16318412 kB
MemFree:         8123456 kB
MemAvailable:   12000000 kB
Buffers:          204800 kB
Cached:          2048000 kB
SwapCached:         1024 kB
SwapTotal:       2097148 kB
SwapFree:        1048574 kB
"""


def status_text(name="bash", state="S (sleeping)", rss_kb=4096):
    lines = [f"Name:\t{name}", "Umask:\t0022", f"State:\t{state}", "Tgid:\t1", "VmPeak:\t  10000 kB"]
    if rss_kb is not None:
        lines.append(f"VmRSS:\t    {rss_kb} kB")
    lines.append("Threads:\t1")
    return "\n".join(lines) + "\n"


class FakeProc:
    """A directory tree shaped like /proc"""

    def __init__(self, root: Path):
        self.root = root

    @property
    def path(self) -> str:
        return str(self.root)

    def add_process(self, pid, text=None, **kwargs):
        proc_dir = self.root / str(pid)
        proc_dir.mkdir()
        (proc_dir / "status").write_text(status_text(**kwargs) if text is None else text)
        return proc_dir

    def add_entry(self, name):
        (self.root / name).mkdir()

    def set_meminfo(self, text=MEMINFO):
        (self.root / "meminfo").write_text(text)


@pytest.fixture
def fake_proc(tmp_path):
    root = tmp_path / "proc"
    root.mkdir()
    return FakeProc(root)
