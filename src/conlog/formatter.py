"""Builds the colorized, timestamped display line for a log call."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from .log import get_logger
from .severity import Severity
from .styles import ColorScheme, RichColorScheme

Clock = Callable[[], datetime]

_log = get_logger("formatter")


class MessageFormatter:
    """Turns (level, format, args) into a console line.

    The line starts with a carriage return so it overwrites whatever an
    interactive prompt has drawn on the current row:

        \\r[HH:MM:SS] [lbl] message
    """

    def __init__(self, scheme: ColorScheme | None = None, clock: Clock = datetime.now):
        self.scheme = scheme if scheme is not None else RichColorScheme()
        self.clock = clock

    @staticmethod
    def substitute(fmt: str, args: tuple[Any, ...]) -> str:
        """%-format fmt with args; with no args fmt is returned as-is.

        Substitution never raises, whether the format doesn't match its args
        or an arg fails to convert to a string: the raw format and the repr
        of the args are returned instead.
        """
        if not args:
            return fmt
        try:
            return fmt % args
        except Exception as e:
            _log.warning(f"Bad log format {fmt!r}: {e!r}")
            try:
                shown = repr(args)
            except Exception:
                shown = "<unprintable args>"
            return f"{fmt} {shown}"

    def decorate(self, level: Severity, message: str, now: datetime | None = None) -> str:
        now = now or self.clock()
        stamp = self.scheme.time(now.strftime("%H:%M:%S"))
        tag = self.scheme.tag(level, level.label)
        return f"\r[{stamp}] [{tag}] {self.scheme.message(level, message)}"

    def format(self, level: Severity, fmt: str, args: tuple[Any, ...] = ()) -> str:
        return self.decorate(level, self.substitute(fmt, args))
