from .evaluator import EvaluationResult
from .report import PerfMetric, format_perf_data, format_report, format_summary, perf_metrics
from ..utils.status import Level


def result(level: Level = Level.WARNING) -> EvaluationResult:
    return EvaluationResult(
        level=level,
        used_kb=700000,
        total_kb=1000000,
        used_percent=70,
        warn_kb=700000,
        warn_percent=70,
        crit_kb=800000,
        crit_percent=80,
    )


class TestReport:
    def test_summary(self):
        assert format_summary(result()) == "WARNING - Memory usage: 700000kB / 1000000kB (70%)"
        assert format_summary(result(Level.OK)).startswith("OK - ")
        assert format_summary(result(Level.CRITICAL)).startswith("CRITICAL - ")

    def test_perf_data(self):
        assert format_perf_data(result()) == "mem_used_kb=700000kB;700000;800000;0;1000000 mem_used_perc=70%;70;80;0;100"

    def test_report(self):
        assert format_report(result(Level.CRITICAL)) == (
            "CRITICAL - Memory usage: 700000kB / 1000000kB (70%) | "
            "mem_used_kb=700000kB;700000;800000;0;1000000 mem_used_perc=70%;70;80;0;100"
        )
        assert "\n" not in format_report(result())

    def test_perf_metrics_order(self):
        metrics = perf_metrics(result())
        assert [metric.name for metric in metrics] == ["mem_used_kb", "mem_used_perc"]
        assert metrics[1] == PerfMetric("mem_used_perc", 70, "%", 70, 80, 0, 100)

    def test_perf_metric_above_hundred(self):
        assert str(PerfMetric("mem_used_perc", 0, "%", 200, 400, 0, 100)) == "mem_used_perc=0%;200;400;0;100"
