"""conlog - colorized console logging with a daily plain-text log file.

The module-level functions log through one process-wide Logger, built from
load_config() the first time it is needed:

    import conlog

    conlog.info("listening on %s:%d", host, port)
    conlog.error("failed: %s", "disk full")

Use configure() to inject a Logger of your own (tests, alternate UIs).
"""

from __future__ import annotations

import threading
from typing import Any

from .ansi import strip_ansi
from .config import LoggingConfig, load_config
from .editor import LineEditor, ReadlineEditor
from .errors import ConlogError, FileSystemError, PathResolutionError
from .files import LogFileManager
from .formatter import MessageFormatter
from .logger import Logger
from .severity import Severity
from .sinks import ConsoleSink, NullSink, OutputSink
from .styles import ColorScheme, RichColorScheme

_default: Logger | None = None
_default_lock = threading.Lock()


def get_logger_instance() -> Logger:
    """Return the process-wide Logger, creating and starting it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                logger = Logger.from_config(load_config())
                logger.startup()
                _default = logger
    return _default


def configure(target: Logger | LoggingConfig | None = None) -> Logger:
    """Replace the process-wide Logger.

    Pass a Logger to install it as-is, a LoggingConfig to build one, or
    nothing to rebuild from load_config().
    """
    global _default
    if isinstance(target, Logger):
        logger = target
    else:
        logger = Logger.from_config(target if target is not None else load_config())
        logger.startup()
    with _default_lock:
        previous, _default = _default, logger
    if previous is not None and previous is not logger:
        previous.close()
    return logger


def reset() -> None:
    """Close and forget the process-wide Logger."""
    global _default
    with _default_lock:
        previous, _default = _default, None
    if previous is not None:
        previous.close()


def debug(fmt: str, *args: Any) -> None:
    get_logger_instance().debug(fmt, *args)


def info(fmt: str, *args: Any) -> None:
    get_logger_instance().info(fmt, *args)


def important(fmt: str, *args: Any) -> None:
    get_logger_instance().important(fmt, *args)


def warning(fmt: str, *args: Any) -> None:
    get_logger_instance().warning(fmt, *args)


def error(fmt: str, *args: Any) -> None:
    get_logger_instance().error(fmt, *args)


def fatal(fmt: str, *args: Any) -> None:
    get_logger_instance().fatal(fmt, *args)


def success(fmt: str, *args: Any) -> None:
    get_logger_instance().success(fmt, *args)


def print_raw(fmt: str, *args: Any) -> None:
    get_logger_instance().print_raw(fmt, *args)


def set_debug_enabled(enabled: bool) -> None:
    get_logger_instance().set_debug_enabled(enabled)


def set_output(sink: OutputSink) -> None:
    get_logger_instance().set_output(sink)


def get_output() -> OutputSink:
    return get_logger_instance().get_output()


def null_sink() -> NullSink:
    return NullSink()


def set_line_editor(editor: LineEditor | None) -> None:
    get_logger_instance().set_line_editor(editor)


__all__ = [
    # Types
    "ColorScheme",
    "ConsoleSink",
    "LineEditor",
    "LogFileManager",
    "Logger",
    "LoggingConfig",
    "MessageFormatter",
    "NullSink",
    "OutputSink",
    "ReadlineEditor",
    "RichColorScheme",
    "Severity",
    # Errors
    "ConlogError",
    "FileSystemError",
    "PathResolutionError",
    # Default logger
    "configure",
    "get_logger_instance",
    "reset",
    # Call surface
    "debug",
    "info",
    "important",
    "warning",
    "error",
    "fatal",
    "success",
    "print_raw",
    # Settings
    "set_debug_enabled",
    "set_output",
    "get_output",
    "null_sink",
    "set_line_editor",
    # Helpers
    "load_config",
    "strip_ansi",
]
