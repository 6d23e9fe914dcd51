"""Optional interactive line editor integration.

When a program keeps a prompt on screen (readline, a REPL), every log line
overwrites it. The logger calls refresh() on the registered editor after
each write so the prompt and any partially typed input are redrawn.
"""

from __future__ import annotations

import weakref
from collections.abc import Callable
from typing import Protocol

from .log import get_logger

_log = get_logger("editor")


class LineEditor(Protocol):
    def refresh(self) -> None: ...


class ReadlineEditor:
    """Redraws the prompt of the stdlib readline module."""

    def refresh(self) -> None:
        import readline

        readline.redisplay()


class EditorHandle:
    """A reference to a LineEditor the logger does not own.

    Editors that support weak references are held weakly; once collected the
    handle behaves as if no editor was set.
    """

    def __init__(self, editor: LineEditor | None = None):
        self._ref: Callable[[], LineEditor | None] = lambda: None
        self.set(editor)

    def set(self, editor: LineEditor | None) -> None:
        if editor is None:
            self._ref = lambda: None
            return
        try:
            self._ref = weakref.ref(editor)
        except TypeError:
            self._ref = lambda: editor

    def get(self) -> LineEditor | None:
        return self._ref()

    def refresh(self) -> bool:
        """Ask the editor to redraw. Returns False if absent or it failed."""
        editor = self.get()
        if editor is None:
            return False
        try:
            editor.refresh()
        except Exception as e:
            _log.debug(f"Line editor refresh failed: {e!r}")
            return False
        return True
