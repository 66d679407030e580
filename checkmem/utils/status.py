from enum import IntEnum


class Level(IntEnum):
    """Plugin status, the value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3
