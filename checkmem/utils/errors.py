class CheckError(Exception):
    """Base class of every error ending the check with an UNKNOWN status"""


class ArgumentError(CheckError):
    """Bad, missing or unrecognized command line argument"""


class InvalidThreshold(ArgumentError):
    pass


class SourceReadError(CheckError):
    """The memory information source is unreadable, unparsable or incomplete"""


class ComputeError(CheckError):
    """Arithmetic impossibility, like a percentage of a zero total"""
