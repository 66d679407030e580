#!/usr/bin/env python3

import argparse
import platform
import sys
from typing import NoReturn, Optional

from packaging.version import Version

from .environment.memory import DEFAULT_MEMINFO, read_snapshot
from .evaluate.evaluator import evaluate
from .evaluate.report import format_report
from .threshold.threshold import DEFAULT_CRITICAL, DEFAULT_WARNING, parse_threshold
from .utils import helpers as h
from .utils.chklogging import checklog, init_logging
from .utils.errors import ArgumentError, CheckError

MIN_PYTHON_RELEASE = "3.9"


def main(argv: Optional[list[str]] = None) -> NoReturn:
    init_logging()

    # Let's ensure no one is running below the expected python release
    if Version(platform.python_version()) < Version(MIN_PYTHON_RELEASE):
        h.fatal(
            f"Current python version {platform.python_version()} is below minimal supported release : {MIN_PYTHON_RELEASE}"
        )

    try:
        args = parse_options(argv)
    except ArgumentError as exception:
        h.fatal(str(exception), "parse_options")

    if args.verbose:
        init_logging(verbose=True)
    checklog().debug(f"thresholds: warning={args.warning} critical={args.critical}")

    try:
        snapshot = read_snapshot(args.meminfo)
        result = evaluate(snapshot, args.warning, args.critical)
    except CheckError as exception:
        h.fatal(str(exception), h.failing_operation(exception))

    print(format_report(result))
    sys.exit(result.level)


class CheckArgumentParser(argparse.ArgumentParser):
    """An ArgumentParser raising ArgumentError instead of exiting with status 2"""

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(f"{message}! See '{self.prog} -h'.")


def parse_options(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = CheckArgumentParser(
        prog="checkmem",
        description="Icinga plugin to check memory. The plugin checks the current memory metrics.",
        epilog="""examples:
  checkmem --warning=80% --critical=90%
    Warn at 80% memory usage and issue a critical at 90%

  checkmem --warning=2147483 --critical=4294967
    Warn at 2GiB memory usage and issue a critical at 4GiB

  checkmem --warning=80% --critical=4294967
    Warn at 80% memory usage and issue a critical if usage exceeds 4GiB
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        add_help=False,
    )
    # help is honoured once every other argument is valid
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Print this help text.",
    )
    parser.add_argument(
        "--warning",
        metavar="<int>[%]",
        default=DEFAULT_WARNING,
        help="The warning threshold. If the memory usage exceeds the threshold given either in kilobytes "
        f"or as a percentage, the plugin will issue a warning (default: {DEFAULT_WARNING}).".replace("%", "%%"),
    )
    parser.add_argument(
        "--critical",
        metavar="<int>[%]",
        default=DEFAULT_CRITICAL,
        help="The critical threshold. If the memory usage exceeds the threshold given either in kilobytes "
        f"or as a percentage, the plugin will issue a critical (default: {DEFAULT_CRITICAL}).".replace("%", "%%"),
    )
    parser.add_argument(
        "--meminfo",
        metavar="<path>",
        default=DEFAULT_MEMINFO,
        help=f"Specify the memory information source (default: {DEFAULT_MEMINFO}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log the intermediate values on standard error.",
    )
    args = parser.parse_args(argv)

    args.warning = parse_threshold(args.warning, "--warning")
    args.critical = parse_threshold(args.critical, "--critical")

    if args.help:
        parser.print_help()
        parser.exit()
    return args


if __name__ == "__main__":
    # don't add anything here setup.py points at main()
    main()
