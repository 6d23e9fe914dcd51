"""Output sinks for colorized console text."""

from __future__ import annotations

from typing import Protocol, TextIO

from rich.console import Console


class OutputSink(Protocol):
    """A writable destination for console output."""

    def write(self, text: str) -> object: ...


class ConsoleSink:
    """Writes pre-rendered text straight to a rich Console's file.

    The text already carries its escape codes, so it bypasses rich's own
    rendering (which would strip the leading carriage return).
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False)

    @property
    def file(self) -> TextIO:
        return self.console.file

    def write(self, text: str) -> int:
        return self.file.write(text)

    def flush(self) -> None:
        self.file.flush()


class NullSink:
    """Discards everything written to it."""

    def write(self, text: str) -> int:
        return len(text)

    def flush(self) -> None:
        pass


def flush_sink(sink: OutputSink) -> None:
    """Flush a sink if it supports flushing."""
    flush = getattr(sink, "flush", None)
    if callable(flush):
        flush()
