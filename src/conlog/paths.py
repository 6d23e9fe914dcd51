"""Path utilities for conlog."""

import os
import sys
from pathlib import Path

from .errors import FileSystemError, PathResolutionError

LOG_DIR_NAME = "logs"


def get_executable_dir() -> Path:
    """Get the directory the running program lives in.

    For frozen apps (PyInstaller and friends) that is the directory of
    sys.executable; otherwise it is the directory of the __main__ script.
    Interactive sessions have no script, so fall back to the interpreter.
    """
    if getattr(sys, "frozen", False):
        candidate = sys.executable
    else:
        main = sys.modules.get("__main__")
        candidate = getattr(main, "__file__", None) or sys.argv[0] or sys.executable

    if not candidate:
        raise PathResolutionError("Could not determine the executable path")
    try:
        return Path(candidate).resolve().parent
    except (OSError, RuntimeError) as e:
        raise PathResolutionError(f"Could not resolve executable path {candidate!r}: {e}") from e


def get_default_log_dir() -> Path:
    """<executable dir>/logs"""
    return get_executable_dir() / LOG_DIR_NAME


def ensure_log_dir(log_dir: Path) -> Path:
    """Create the log directory (world-writable, subject to umask) if needed."""
    try:
        log_dir.mkdir(mode=0o777, parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemError(f"Error creating logs directory {log_dir}: {e}") from e
    if not os.access(log_dir, os.W_OK):
        raise FileSystemError(f"Logs directory {log_dir} is not writable")
    return log_dir
