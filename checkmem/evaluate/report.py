from __future__ import annotations

from dataclasses import dataclass

from .evaluator import EvaluationResult


@dataclass(frozen=True)
class PerfMetric:
    """A performance data entry: `name=<value><unit>;<warn>;<crit>;<min>;<max>`"""

    name: str
    value: int
    unit: str
    warn: int
    crit: int
    min: int
    max: int

    def __str__(self) -> str:
        return f"{self.name}={self.value}{self.unit};{self.warn};{self.crit};{self.min};{self.max}"


def perf_metrics(result: EvaluationResult) -> list[PerfMetric]:
    """Return the performance data, the order is part of the output format"""
    return [
        PerfMetric("mem_used_kb", result.used_kb, "kB", result.warn_kb, result.crit_kb, 0, result.total_kb),
        PerfMetric("mem_used_perc", result.used_percent, "%", result.warn_percent, result.crit_percent, 0, 100),
    ]


def format_summary(result: EvaluationResult) -> str:
    return (
        f"{result.level.name} - Memory usage: "
        f"{result.used_kb}kB / {result.total_kb}kB ({result.used_percent}%)"
    )


def format_perf_data(result: EvaluationResult) -> str:
    return " ".join(str(metric) for metric in perf_metrics(result))


def format_report(result: EvaluationResult) -> str:
    """Return the single status line printed for the monitoring framework"""
    return f"{format_summary(result)} | {format_perf_data(result)}"
