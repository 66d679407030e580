import logging
import sys

from datetime import datetime

LOGGER = "checkmem"
DATEFMT = "%Y-%m-%dT%H:%M:%S.%f"


def init_logging(verbose: bool = False) -> None:
    logger = logging.getLogger(LOGGER)

    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    out = logging.StreamHandler(stream=sys.stderr)

    fmt = OperationFormatter(datefmt=DATEFMT)
    out.setFormatter(fmt)

    logger.handlers = [out]


def checklog() -> logging.Logger:
    return logging.getLogger(LOGGER)


class OperationFormatter(logging.Formatter):
    """Render `<timestamp> <LEVEL> <operation>: <message>` lines.

    CRITICAL records are labelled FATAL. The operation is the `operation`
    attribute of the record when given, the emitting function otherwise.
    """

    level_names = {logging.CRITICAL: "FATAL"}

    def formatTime(self, record: logging.LogRecord, datefmt=None) -> str:
        return datetime.fromtimestamp(record.created).strftime(datefmt or DATEFMT)

    def format(self, record: logging.LogRecord) -> str:
        super().format(record)
        level = self.level_names.get(record.levelno, record.levelname)
        operation = getattr(record, "operation", None) or record.funcName
        timestamp = self.formatTime(record, self.datefmt)
        output = f"{timestamp} {level} {operation}: {record.message}"
        if record.exc_text:
            output += "\n" + record.exc_text
        return output
