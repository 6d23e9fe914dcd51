"""The log dispatcher.

A Logger serializes every log call behind one lock: rotation check, console
write, file write and line-editor refresh happen as a unit, so lines from
different threads never interleave.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from .ansi import strip_ansi
from .config import LoggingConfig
from .editor import EditorHandle, LineEditor
from .errors import ConlogError, FileSystemError
from .files import LogFileManager
from .formatter import MessageFormatter
from .log import get_logger
from .paths import ensure_log_dir, get_default_log_dir
from .severity import Severity
from .sinks import ConsoleSink, NullSink, OutputSink, flush_sink
from .styles import ColorScheme, scheme_for_mode

_log = get_logger("logger")


class Logger:
    """Console-and-file logger.

    Args:
        files: Manages the daily log file. None means console only.
        sink: Where colorized lines go. Defaults to stdout via rich.
        formatter: Builds the display line; shares its clock with files.
        debug_enabled: Whether debug() produces output.
        editor: Optional line editor to refresh after each write.
    """

    def __init__(
        self,
        files: LogFileManager | None = None,
        sink: OutputSink | None = None,
        formatter: MessageFormatter | None = None,
        debug_enabled: bool = True,
        editor: LineEditor | None = None,
    ):
        self.files = files
        self.formatter = formatter or MessageFormatter()
        self._sink: OutputSink = sink if sink is not None else ConsoleSink()
        self._debug_enabled = debug_enabled
        self._editor = EditorHandle(editor)
        self._lock = threading.Lock()
        self._file_warned = False

    @classmethod
    def from_config(
        cls,
        config: LoggingConfig,
        sink: OutputSink | None = None,
        clock: Callable[[], datetime] = datetime.now,
        scheme: ColorScheme | None = None,
    ) -> Logger:
        """Build a Logger from config. Directory problems are reported on
        the sink and leave the logger console-only."""
        sink = sink if sink is not None else ConsoleSink()
        if scheme is None:
            console = sink.console if isinstance(sink, ConsoleSink) else None
            scheme = scheme_for_mode(config.color, console)
        formatter = MessageFormatter(scheme=scheme, clock=clock)

        files = None
        try:
            log_dir = Path(config.log_dir) if config.log_dir else get_default_log_dir()
            ensure_log_dir(log_dir)
            files = LogFileManager(log_dir, clock=clock, rotation=config.rotation)
        except ConlogError as e:
            sink.write(f"Warning: file logging disabled: {e}\n")

        return cls(files=files, sink=sink, formatter=formatter, debug_enabled=config.debug)

    # Configuration surface

    @property
    def debug_enabled(self) -> bool:
        return self._debug_enabled

    def set_debug_enabled(self, enabled: bool) -> None:
        self._debug_enabled = enabled

    def set_output(self, sink: OutputSink) -> None:
        self._sink = sink

    def get_output(self) -> OutputSink:
        return self._sink

    @staticmethod
    def null_sink() -> NullSink:
        return NullSink()

    def set_line_editor(self, editor: LineEditor | None) -> None:
        self._editor.set(editor)

    @property
    def log_dir(self) -> Path | None:
        return self.files.log_dir if self.files is not None else None

    # Lifecycle

    def startup(self) -> bool:
        """Open today's log file and say where logs go.

        Returns False (after a console warning) on failure.
        """
        with self._lock:
            ok = self._check_rotation(announce=True)
            if ok:
                self._sink.write(f"Logs will be saved in: {self.files.log_dir}\n")
                flush_sink(self._sink)
            return ok

    def close(self) -> None:
        with self._lock:
            if self.files is not None:
                self.files.close()

    # Call surface

    def log(self, level: Severity, fmt: str, *args: Any) -> None:
        """Log one message; a trailing newline is added."""
        message = self.formatter.substitute(fmt, args)
        with self._lock:
            now = self.formatter.clock()
            self._check_rotation(now)
            self._sink.write(self.formatter.decorate(level, message, now) + "\n")
            self._write_file(strip_ansi(message) + "\n", now)
            flush_sink(self._sink)
            self._editor.refresh()

    def print_raw(self, fmt: str, *args: Any) -> None:
        """Write fmt % args to both sinks with no decoration or newline."""
        message = self.formatter.substitute(fmt, args)
        with self._lock:
            now = self.formatter.clock()
            self._check_rotation(now)
            self._sink.write(message)
            self._write_file(strip_ansi(message), now)
            flush_sink(self._sink)
            self._editor.refresh()

    def debug(self, fmt: str, *args: Any) -> None:
        if self._debug_enabled:
            self.log(Severity.DEBUG, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        self.log(Severity.INFO, fmt, *args)

    def important(self, fmt: str, *args: Any) -> None:
        self.log(Severity.IMPORTANT, fmt, *args)

    def warning(self, fmt: str, *args: Any) -> None:
        self.log(Severity.WARNING, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        self.log(Severity.ERROR, fmt, *args)

    def fatal(self, fmt: str, *args: Any) -> None:
        self.log(Severity.FATAL, fmt, *args)

    def success(self, fmt: str, *args: Any) -> None:
        self.log(Severity.SUCCESS, fmt, *args)

    # Internals; callers hold self._lock

    def _check_rotation(self, now: datetime | None = None, announce: bool = False) -> bool:
        """Rotate if needed. New files are announced on the sink when they
        replace an earlier one, or always with announce=True."""
        if self.files is None:
            return False
        previous = self.files.opened_for
        try:
            opened = self.files.ensure_current(now)
        except FileSystemError as e:
            action = "opening" if previous is None else "rotating"
            self._sink.write(f"Error {action} log file: {e}; logging to console only\n")
            self._file_warned = True
            return False
        if opened and (announce or previous is not None):
            self._sink.write(f"Created new log file: {self.files.current_path}\n")
        return self.files.is_open

    def _write_file(self, text: str, now: datetime | None) -> None:
        if self.files is None or not self.files.is_open:
            self._warn_file_unavailable()
            return
        try:
            self.files.write_line(text, now)
        except FileSystemError as e:
            self._sink.write(f"Warning: {e}; log file unavailable until the next rotation\n")
            self._file_warned = True
            self.files.mark_failed()
            return
        self._file_warned = False

    def _warn_file_unavailable(self) -> None:
        if self._file_warned:
            return
        self._file_warned = True
        self._sink.write("Warning: log file unavailable, log not written to file\n")
