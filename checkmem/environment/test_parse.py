import pathlib
import unittest

from .memory import KernelMemoryInfo, MemorySnapshot, read_snapshot
from ..utils.errors import SourceReadError

PARSING = pathlib.Path("./checkmem/tests/parsing/meminfo")


class TestParseMeminfo(unittest.TestCase):
    def test_parsing_kernel6(self):
        d = PARSING / "kernel6"
        content = (d / "meminfo").read_text()
        raw = KernelMemoryInfo.parse(content)

        assert len(raw) == len(content.splitlines())
        assert raw["MemTotal"] == 32594304
        assert raw["MemAvailable"] == 20119788
        assert raw["VmallocTotal"] == 34359738367
        # Values without unit are kept as is
        assert raw["HugePages_Total"] == 0
        # Parenthesis are normalized
        assert raw["Active_anon"] == 428440
        assert raw["Inactive_file"] == 7094224
        assert "Active(anon)" not in raw

    def test_snapshot(self):
        memory = KernelMemoryInfo(PARSING / "kernel6" / "meminfo")
        memory.detect()
        assert memory.snapshot() == MemorySnapshot(total_kb=32594304, available_kb=20119788)
        assert read_snapshot(PARSING / "kernel6" / "meminfo") == memory.snapshot()

    def test_missing_memavailable(self):
        """Kernels before 3.14 do not report MemAvailable"""
        memory = KernelMemoryInfo(PARSING / "kernel3_2" / "meminfo")
        memory.detect()
        assert memory.get_total() == 4046684
        with self.assertRaises(SourceReadError) as context:
            memory.snapshot()
        assert "MemAvailable" in str(context.exception)

    def test_missing_memtotal(self):
        raw = KernelMemoryInfo.parse("MemAvailable: 1024 kB\n")
        assert raw == {"MemAvailable": 1024}
        memory = KernelMemoryInfo()
        memory._raw = raw
        with self.assertRaises(SourceReadError) as context:
            memory.snapshot()
        assert "MemTotal" in str(context.exception)

    def test_garbage(self):
        raw = KernelMemoryInfo.parse((PARSING / "garbage" / "meminfo").read_text())
        assert raw == {}
        with self.assertRaises(SourceReadError):
            read_snapshot(PARSING / "garbage" / "meminfo")

    def test_invalid_values_are_skipped(self):
        raw = KernelMemoryInfo.parse("MemTotal: -12 kB\nMemFree: 1.5 kB\nBuffers: 12 MB\nCached:\t\t 42 kB\n\n")
        assert raw == {"Cached": 42}

    def test_empty_source(self):
        with self.assertRaises(SourceReadError):
            read_snapshot("/dev/null")

    def test_unreadable_source(self):
        with self.assertRaises(SourceReadError) as context:
            read_snapshot(PARSING / "does-not-exist")
        assert "does-not-exist" in str(context.exception)

    def test_zero_total(self):
        snapshot = read_snapshot(PARSING / "zero_total" / "meminfo")
        assert snapshot == MemorySnapshot(total_kb=0, available_kb=0)
