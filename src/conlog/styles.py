"""Color schemes for console output.

A ColorScheme maps a Severity to a pair of rich styles: one for the bracketed
tag, one for the message body. Rendering goes through rich so the same scheme
can emit 16-color, 256-color or no escapes at all.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from .severity import Severity


@dataclass(frozen=True)
class LevelStyle:
    """Tag and message styles for one severity."""

    tag: Style
    message: Style


DEFAULT_STYLES: dict[Severity, LevelStyle] = {
    Severity.DEBUG: LevelStyle(
        tag=Style(color="black", bgcolor="bright_black"),
        message=Style(color="bright_black"),
    ),
    Severity.INFO: LevelStyle(
        tag=Style(color="green", bgcolor="black"),
        message=Style(),
    ),
    Severity.IMPORTANT: LevelStyle(
        tag=Style(color="white", bgcolor="bright_blue"),
        message=Style(),
    ),
    Severity.WARNING: LevelStyle(
        tag=Style(color="bright_yellow", bgcolor="black"),
        message=Style(),
    ),
    Severity.ERROR: LevelStyle(
        tag=Style(color="white", bgcolor="red"),
        message=Style(color="red"),
    ),
    Severity.FATAL: LevelStyle(
        tag=Style(color="black", bgcolor="red"),
        message=Style(color="red", bold=True),
    ),
    Severity.SUCCESS: LevelStyle(
        tag=Style(color="white", bgcolor="green"),
        message=Style(color="green"),
    ),
}

COLOR_MODES = ("auto", "always", "never")


class ColorScheme(Protocol):
    """Anything that can render the three parts of a display line."""

    def time(self, text: str) -> str: ...

    def tag(self, level: Severity, text: str) -> str: ...

    def message(self, level: Severity, text: str) -> str: ...


@dataclass
class RichColorScheme:
    """ColorScheme backed by rich styles.

    color_system=None disables escapes entirely; the rendered text is then
    the plain text passed in.
    """

    color_system: ColorSystem | None = ColorSystem.STANDARD
    styles: dict[Severity, LevelStyle] = field(default_factory=lambda: dict(DEFAULT_STYLES))
    time_style: Style = field(default_factory=Style)

    def _render(self, style: Style, text: str) -> str:
        if self.color_system is None:
            return text
        return style.render(text, color_system=self.color_system)

    def time(self, text: str) -> str:
        return self._render(self.time_style, text)

    def tag(self, level: Severity, text: str) -> str:
        return self._render(self.styles[level].tag, text)

    def message(self, level: Severity, text: str) -> str:
        return self._render(self.styles[level].message, text)


def plain_scheme() -> RichColorScheme:
    """A scheme that never emits escape codes (CI, pipes, NO_COLOR)."""
    return RichColorScheme(color_system=None)


def scheme_for_mode(mode: str = "auto", console: Console | None = None) -> RichColorScheme:
    """Build a scheme for a color mode.

    "auto" asks rich whether the console is a color terminal, which takes
    NO_COLOR, FORCE_COLOR and TTY detection into account.
    """
    if mode not in COLOR_MODES:
        raise ValueError(f"color must be one of {', '.join(COLOR_MODES)}, got {mode!r}")
    if mode == "never":
        return plain_scheme()
    if mode == "always":
        return RichColorScheme(color_system=ColorSystem.STANDARD)

    console = console or Console()
    if console.color_system is None:
        return plain_scheme()
    return RichColorScheme(color_system=ColorSystem.STANDARD)
