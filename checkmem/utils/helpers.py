import sys
import traceback
from typing import NoReturn, Optional

from .chklogging import checklog
from .status import Level


def fatal(message, operation: Optional[str] = None) -> NoReturn:
    """Log a fatal diagnostic, report the UNKNOWN status and leave.

    The diagnostic names `operation`, or the caller of fatal() when omitted.
    """
    extra = {"operation": operation} if operation else None
    checklog().critical(message, extra=extra, stacklevel=2)
    print(f"{Level.UNKNOWN.name} - {message}")
    sys.exit(Level.UNKNOWN)


def failing_operation(exception: BaseException) -> Optional[str]:
    """Return the name of the function where `exception` was raised"""
    frames = traceback.extract_tb(exception.__traceback__)
    if not frames:
        return None
    return frames[-1].name
