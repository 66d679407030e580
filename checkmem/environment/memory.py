from __future__ import annotations

import pathlib
import re
from dataclasses import dataclass

from ..utils.chklogging import checklog
from ..utils.errors import SourceReadError

DEFAULT_MEMINFO = "/proc/meminfo"

MEM_TOTAL = "MemTotal"
MEM_AVAILABLE = "MemAvailable"

# Active(anon) -> Active_anon
PARENTHESIS_RE = re.compile(r"\((.+)\)")


@dataclass(frozen=True)
class MemorySnapshot:
    """Total and available memory, in kilobytes as reported by the kernel"""

    total_kb: int
    available_kb: int


class KernelMemoryInfo:
    def __init__(self, meminfo: str | pathlib.Path = DEFAULT_MEMINFO) -> None:
        self.meminfo = pathlib.Path(meminfo)
        self._raw: dict[str, int] = {}

    def detect(self):
        try:
            content = self.meminfo.read_text()
        except (OSError, UnicodeDecodeError) as exception:
            raise SourceReadError(f"Failed to parse memory info from '{self.meminfo}': {exception}") from exception
        self._raw = self.parse(content)
        if not self._raw:
            raise SourceReadError(f"Failed to parse memory info from '{self.meminfo}'!")

    @staticmethod
    def parse(content: str) -> dict[str, int]:
        """Turn `Key: N kB` lines into a key -> kilobytes mapping.

        Lines that are not a `key: integer` pair are skipped.
        """
        raw: dict[str, int] = {}
        for line in content.splitlines():
            if not line.strip():
                continue
            try:
                key, value = line.split(":", 1)
            except ValueError:
                checklog().debug(f"Skipping meminfo line without separator: {line!r}")
                continue
            key = PARENTHESIS_RE.sub(r"_\1", "".join(key.split()))
            amount = "".join(value.split())
            if amount.endswith("kB"):
                amount = amount[: -len("kB")]
            if not amount.isascii() or not amount.isdigit():
                checklog().debug(f"Skipping meminfo key {key} with a non integer value {value.strip()!r}")
                continue
            raw[key] = int(amount)
        return raw

    def get_total(self) -> int:
        total = self._raw.get(MEM_TOTAL)
        if total is None:
            raise SourceReadError(f"Failed to extract the {MEM_TOTAL} value!")
        return total

    def get_available(self) -> int:
        available = self._raw.get(MEM_AVAILABLE)
        if available is None:
            raise SourceReadError(f"Failed to extract the {MEM_AVAILABLE} value!")
        return available

    def snapshot(self) -> MemorySnapshot:
        return MemorySnapshot(total_kb=self.get_total(), available_kb=self.get_available())


def read_snapshot(meminfo: str | pathlib.Path = DEFAULT_MEMINFO) -> MemorySnapshot:
    """Read the memory information source once and extract the snapshot"""
    memory = KernelMemoryInfo(meminfo)
    memory.detect()
    snapshot = memory.snapshot()
    checklog().debug(f"{memory.meminfo}: {MEM_TOTAL}={snapshot.total_kb}kB {MEM_AVAILABLE}={snapshot.available_kb}kB")
    return snapshot
