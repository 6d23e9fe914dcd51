"""Internal diagnostics for conlog.

conlog's own events (log file created, rotation, editor refresh failures)
go through Python's logging module under the "conlog" hierarchy. Nothing is
printed unless the host application configures logging; to see them:

    logging.getLogger("conlog").addHandler(logging.StreamHandler())
"""

import logging

DIAGNOSTIC_FORMAT = logging.Formatter("%(asctime)s %(name)s %(message)s", datefmt="%H:%M:%S")

_root = logging.getLogger("conlog")
_root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    return _root.getChild(name)


def enable_diagnostics(path: str, level: int = logging.DEBUG) -> logging.Handler:
    """Append conlog's own diagnostics to a file. Returns the added handler."""
    handler = logging.FileHandler(path)
    handler.setFormatter(DIAGNOSTIC_FORMAT)
    _root.addHandler(handler)
    _root.setLevel(level)
    return handler
