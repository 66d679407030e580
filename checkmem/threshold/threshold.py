from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ..utils.errors import InvalidThreshold

DEFAULT_WARNING = "70%"
DEFAULT_CRITICAL = "80%"

THRESHOLD_RE = re.compile(r"[0-9]+%?")


class ThresholdKind(Enum):
    PERCENT = "percent"
    ABSOLUTE = "absolute"


@dataclass(frozen=True)
class ThresholdSpec:
    """A warning or critical limit, in kilobytes or in percent of the total memory"""

    kind: ThresholdKind
    value: int

    def is_percent(self) -> bool:
        return self.kind is ThresholdKind.PERCENT

    def __str__(self) -> str:
        return f"{self.value}%" if self.is_percent() else str(self.value)


def parse_threshold(text: str | None, name: str = "threshold") -> ThresholdSpec:
    """Parse `N` (kilobytes) or `N%` (percent of the total memory).

    No upper bound is enforced: `150%` is a valid threshold that can never trigger.
    """
    if not text:
        raise InvalidThreshold(f"Argument '{name}' requires a parameter!")
    if not THRESHOLD_RE.fullmatch(text):
        raise InvalidThreshold(f"Parameter '{text}' to argument '{name}' must be an integer, optionally followed by '%'!")

    if text.endswith("%"):
        return ThresholdSpec(ThresholdKind.PERCENT, int(text[:-1]))
    return ThresholdSpec(ThresholdKind.ABSOLUTE, int(text))
