"""Shared fixtures for conlog tests."""

import io
from datetime import datetime, timedelta

import pytest

import conlog
from conlog.files import LogFileManager
from conlog.formatter import MessageFormatter
from conlog.logger import Logger
from conlog.styles import plain_scheme


class FakeClock:
    """A settable stand-in for datetime.now."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture(autouse=True)
def _isolate(tmp_path, monkeypatch):
    """Keep tests away from the real config file and the default logger."""
    monkeypatch.setenv("CONLOG_CONFIG", str(tmp_path / "config.toml"))
    monkeypatch.delenv("CONLOG_LOG_DIR", raising=False)
    monkeypatch.delenv("CONLOG_DEBUG", raising=False)
    conlog.reset()
    yield
    conlog.reset()


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 15, 10, 30, 0))


@pytest.fixture
def log_dir(tmp_path):
    path = tmp_path / "logs"
    path.mkdir()
    return path


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def logger(log_dir, clock, sink):
    """A Logger with plain (uncolored) output, a fake clock and a StringIO sink."""
    files = LogFileManager(log_dir, clock=clock)
    formatter = MessageFormatter(scheme=plain_scheme(), clock=clock)
    lg = Logger(files=files, sink=sink, formatter=formatter)
    yield lg
    lg.close()
