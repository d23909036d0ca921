"""Tests for /proc status and meminfo parsing."""

import pytest

from conftest import MEMINFO, status_text
from system_reader import (
    is_pid_entry,
    parse_meminfo,
    parse_status,
    read_memory,
    read_process,
)


@pytest.mark.parametrize("entry", ["1", "42", "007", "4194304"])
def test_numeric_entries_are_pids(entry):
    assert is_pid_entry(entry)


@pytest.mark.parametrize("entry", ["", "0", "000", "self", "abc", "12a", "-1", "+5", " 1", "²", "١٢"])
def test_other_entries_are_not_pids(entry):
    assert not is_pid_entry(entry)


def test_parse_status_reads_name_state_and_rss():
    record = parse_status(123, status_text(name="python3", state="R (running)", rss_kb=20480).splitlines(True))
    assert record.pid == 123
    assert record.name == "python3"
    assert record.state == "R"
    assert record.memory_kb == 20480


def test_parse_status_missing_fields_use_placeholders():
    record = parse_status(9, ["Umask:\t0022\n", "Tgid:\t9\n"])
    assert record.name == "?"
    assert record.state == "?"
    assert record.memory_kb == 0


def test_parse_status_kernel_thread_without_rss():
    record = parse_status(2, status_text(name="kthreadd", rss_kb=None).splitlines(True))
    assert record.name == "kthreadd"
    assert record.memory_kb == 0


def test_parse_status_uses_first_occurrence():
    lines = ["Name:\tfirst\n", "Name:\tsecond\n", "State:\tS (sleeping)\n", "State:\tR (running)\n"]
    record = parse_status(5, lines)
    assert record.name == "first"
    assert record.state == "S"


def test_parse_status_stops_once_all_fields_found():
    consumed = []

    def lines():
        for line in ["Name:\tsh\n", "State:\tS\n", "VmRSS:\t 12 kB\n", "Threads:\t1\n", "Cpus_allowed:\tff\n"]:
            consumed.append(line)
            yield line

    record = parse_status(7, lines())
    assert record.memory_kb == 12
    assert len(consumed) == 3


def test_parse_status_unparseable_rss_keeps_scanning():
    lines = ["Name:\tsh\n", "State:\tS\n", "VmRSS:\tgarbage\n", "VmRSS:\t 64 kB\n"]
    assert parse_status(7, lines).memory_kb == 64


def test_parse_status_name_is_truncated_and_nul_free():
    record = parse_status(8, ["Name:\t" + "a\x00b" * 100 + "\n"])
    assert "\x00" not in record.name
    assert len(record.name) == 127


def test_parse_status_blank_state_uses_placeholder():
    record = parse_status(8, ["Name:\tx\n", "State:   \n"])
    assert record.state == "?"


def test_parse_meminfo_reads_recognized_keys():
    sample = parse_meminfo(MEMINFO.splitlines(True))
    assert sample.total_kb == 16318412
    assert sample.free_kb == 8123456
    assert sample.available_kb == 12000000
    assert sample.buffers_kb == 204800
    assert sample.swap_total_kb == 2097148
    assert sample.swap_free_kb == 1048574


def test_parse_meminfo_cached_is_not_swap_cached():
    sample = parse_meminfo(["SwapCached:   1024 kB\n", "Cached:  2048 kB\n"])
    assert sample.cached_kb == 2048


def test_parse_meminfo_missing_swap_free_defaults_to_zero():
    text = "\n".join(line for line in MEMINFO.splitlines() if not line.startswith("SwapFree"))
    sample = parse_meminfo(text.splitlines(True))
    assert sample.swap_free_kb == 0
    assert sample.swap_used_kb == sample.swap_total_kb


def test_parse_meminfo_ignores_unknown_and_malformed_lines():
    sample = parse_meminfo(["HugePages_Total: 0\n", "no colon here\n", "MemTotal: lots kB\n"])
    assert sample.total_kb == 0


def test_read_process_from_file(fake_proc):
    fake_proc.add_process(31, name="nginx", state="S (sleeping)", rss_kb=1000)
    record = read_process(31, fake_proc.path)
    assert record.name == "nginx"
    assert record.memory_kb == 1000


def test_read_process_vanished_returns_none(fake_proc):
    assert read_process(99999, fake_proc.path) is None


def test_read_memory_from_file(fake_proc):
    fake_proc.set_meminfo()
    assert read_memory(fake_proc.path).total_kb == 16318412


def test_read_memory_unavailable_returns_none(fake_proc):
    assert read_memory(fake_proc.path) is None
