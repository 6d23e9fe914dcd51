"""Exceptions raised inside conlog.

None of these reach the caller of a log function; the logger catches them
where they originate and prints a one-line warning to its console sink.
"""


class ConlogError(Exception):
    """Base class for conlog errors."""


class FileSystemError(ConlogError):
    """The log directory is missing, or the log file can't be opened or written."""


class PathResolutionError(ConlogError):
    """The running program's own location can't be determined."""
