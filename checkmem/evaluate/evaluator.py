from __future__ import annotations

from dataclasses import dataclass

from . import units
from ..environment.memory import MemorySnapshot
from ..threshold.threshold import ThresholdSpec
from ..utils.chklogging import checklog
from ..utils.status import Level


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of one check, every threshold carrying both its kB and percent views"""

    level: Level
    used_kb: int
    total_kb: int
    used_percent: int
    warn_kb: int
    warn_percent: int
    crit_kb: int
    crit_percent: int
    available_kb: int = 0
    available_percent: int = 0


def threshold_views(threshold: ThresholdSpec, total_kb: int) -> tuple[int, int]:
    """Return the (kB, percent) pair of a threshold for a given total"""
    if threshold.is_percent():
        return units.to_kb(threshold.value, total_kb), threshold.value
    return threshold.value, units.to_percent(threshold.value, total_kb)


def decide(used_kb: int, warn_kb: int, crit_kb: int) -> Level:
    """Compare the used memory to the thresholds, in kilobytes.

    Critical is checked first: a usage crossing both thresholds is CRITICAL.
    """
    if used_kb >= crit_kb:
        return Level.CRITICAL
    if used_kb >= warn_kb:
        return Level.WARNING
    return Level.OK


def evaluate(snapshot: MemorySnapshot, warning: ThresholdSpec, critical: ThresholdSpec) -> EvaluationResult:
    """Turn a memory snapshot and the two thresholds into a status.

    Raises ComputeError when the total memory is zero.
    """
    total_kb = snapshot.total_kb
    used_kb = units.used_kb(total_kb, snapshot.available_kb)
    used_percent = units.to_percent(used_kb, total_kb)

    warn_kb, warn_percent = threshold_views(warning, total_kb)
    crit_kb, crit_percent = threshold_views(critical, total_kb)

    level = decide(used_kb, warn_kb, crit_kb)
    checklog().debug(
        f"used={used_kb}kB ({used_percent}%) warning={warn_kb}kB ({warn_percent}%) "
        f"critical={crit_kb}kB ({crit_percent}%) -> {level.name}"
    )

    return EvaluationResult(
        level=level,
        used_kb=used_kb,
        total_kb=total_kb,
        used_percent=used_percent,
        warn_kb=warn_kb,
        warn_percent=warn_percent,
        crit_kb=crit_kb,
        crit_percent=crit_percent,
        available_kb=snapshot.available_kb,
        available_percent=units.to_percent(snapshot.available_kb, total_kb),
    )
