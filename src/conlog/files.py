"""Daily log file management.

LogFileManager owns the single open log file and the date it was opened for.
ensure_current() rotates to a new file named for today whenever the date has
moved on since the last open.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path
from typing import TextIO

from .errors import FileSystemError
from .log import get_logger

_log = get_logger("files")

ROTATION_POLICIES = ("date", "day")


def log_filename(day: date) -> str:
    return f"log_{day:%Y-%m-%d}.txt"


class LogFileManager:
    """Owns the current log file handle.

    Args:
        log_dir: Directory log files are created in. Must already exist.
        clock: Returns the current local time.
        rotation: "date" rotates whenever the calendar date changes. "day"
            only compares the day of the month, so a process alive from
            Jan 15 to Feb 15 keeps writing to the January file; it exists
            for compatibility with older deployments.
    """

    def __init__(
        self,
        log_dir: Path,
        clock: Callable[[], datetime] = datetime.now,
        rotation: str = "date",
    ):
        if rotation not in ROTATION_POLICIES:
            raise ValueError(f"rotation must be 'date' or 'day', got {rotation!r}")
        self.log_dir = Path(log_dir)
        self.clock = clock
        self.rotation = rotation
        self._file: TextIO | None = None
        self._opened_for: date | None = None
        self._path: Path | None = None
        self._failed_for: date | None = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    @property
    def opened_for(self) -> date | None:
        return self._opened_for

    @property
    def current_path(self) -> Path | None:
        return self._path

    def path_for(self, day: date) -> Path:
        return self.log_dir / log_filename(day)

    def _same_period(self, a: date, b: date) -> bool:
        if self.rotation == "day":
            return a.day == b.day
        return a == b

    def needs_rotation(self, today: date) -> bool:
        if self._opened_for is None:
            return True
        return not self._same_period(self._opened_for, today)

    def ensure_current(self, now: datetime | None = None) -> bool:
        """Make sure the open file is the one for today, rotating if not.

        Pass now when the caller also stamps the line, so the file and the
        timestamp agree across midnight. Returns True if a new file was
        opened. Raises FileSystemError if the new file can't be opened; a
        failed date is not retried until the date changes again.
        """
        today = (now or self.clock()).date()
        if not self.needs_rotation(today):
            return False
        if self._failed_for is not None and self._same_period(self._failed_for, today):
            return False
        self._rotate(today)
        return True

    def _rotate(self, today: date) -> None:
        previous = self._path
        self.close()

        path = self.path_for(today)
        if not self.log_dir.is_dir():
            self._failed_for = today
            raise FileSystemError(f"Log directory {self.log_dir} does not exist")
        try:
            self._file = open(path, "a", encoding="utf-8", buffering=1)
        except OSError as e:
            self._failed_for = today
            raise FileSystemError(f"Error opening log file {path}: {e}") from e

        self._opened_for = today
        self._path = path
        self._failed_for = None
        if previous is not None:
            _log.info(f"Rotated log file {previous} -> {path}")
        _log.info(f"Created new log file: {path}")

    def write_line(self, text: str, now: datetime | None = None) -> None:
        """Append "HH:MM:SS text" to the open file, newline-terminated."""
        if self._file is None:
            raise FileSystemError("No log file is open")
        now = now or self.clock()
        if not text.endswith("\n"):
            text += "\n"
        try:
            self._file.write(f"{now:%H:%M:%S} {text}")
            self._file.flush()
        except (OSError, ValueError) as e:
            raise FileSystemError(f"Error writing to log file {self._path}: {e}") from e

    def mark_failed(self) -> None:
        """Close the file and keep it closed until the next date change."""
        if self._opened_for is not None:
            self._failed_for = self._opened_for
        self.close()

    def close(self) -> None:
        """Close the open file, if any. The manager returns to Uninitialized."""
        if self._file is not None:
            try:
                self._file.close()
            except OSError as e:
                _log.warning(f"Error closing log file {self._path}: {e}")
        self._file = None
        self._opened_for = None
        self._path = None

    def __enter__(self) -> LogFileManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
