from ..utils.errors import ComputeError


def _natural(*values: int) -> None:
    for value in values:
        if value < 0:
            raise ComputeError(f"{value} is not a natural number")


def used_kb(total_kb: int, available_kb: int) -> int:
    """Used memory, never negative"""
    _natural(total_kb, available_kb)
    return max(0, total_kb - available_kb)


def to_percent(kb: int, total_kb: int) -> int:
    """Truncated percentage of `kb` in `total_kb`"""
    _natural(kb, total_kb)
    if total_kb == 0:
        raise ComputeError("Cannot compute a percentage of a zero total")
    return kb * 100 // total_kb


def to_kb(percent: int, total_kb: int) -> int:
    """Truncated amount of kilobytes `percent` of `total_kb` stands for"""
    _natural(percent, total_kb)
    if total_kb == 0:
        raise ComputeError("Cannot compute kilobytes from a percentage of a zero total")
    return total_kb * percent // 100
