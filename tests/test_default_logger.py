"""Tests for the process-wide logger and module-level functions."""

import io

import conlog
from conlog.files import LogFileManager
from conlog.formatter import MessageFormatter
from conlog.styles import plain_scheme


def test_configure_injects_logger(logger, sink):
    assert conlog.configure(logger) is logger
    assert conlog.get_logger_instance() is logger

    conlog.error("failed: %s", "disk full")
    conlog.print_raw("raw\n")

    assert sink.getvalue() == "\r[10:30:00] [err] failed: disk full\nraw\n"


def test_module_level_levels(logger, sink):
    conlog.configure(logger)
    conlog.debug("d")
    conlog.info("i")
    conlog.important("imp")
    conlog.warning("w")
    conlog.fatal("f")
    conlog.success("s")

    labels = [line.split("] [")[1][:3] for line in sink.getvalue().split("\n")[:-1]]
    assert labels == ["dbg", "inf", "imp", "war", "!!!", "+++"]


def test_module_level_settings(logger, sink):
    conlog.configure(logger)

    conlog.set_debug_enabled(False)
    conlog.debug("hidden")
    assert sink.getvalue() == ""

    other = io.StringIO()
    conlog.set_output(other)
    assert conlog.get_output() is other
    conlog.info("elsewhere")
    assert "elsewhere" in other.getvalue()

    conlog.set_output(conlog.null_sink())
    conlog.info("gone")
    assert "gone" not in other.getvalue()


def test_default_logger_built_from_config(tmp_path, monkeypatch, capsys):
    """The first call builds the default logger and opens today's file."""
    log_dir = tmp_path / "default-logs"
    monkeypatch.setenv("CONLOG_LOG_DIR", str(log_dir))

    logger = conlog.get_logger_instance()
    assert conlog.get_logger_instance() is logger
    assert logger.log_dir == log_dir
    assert logger.files.is_open

    conlog.info("hello from %s", "default")
    assert "hello from default" in capsys.readouterr().out
    assert "hello from default" in logger.files.current_path.read_text()


def test_configure_replaces_and_closes_previous(log_dir, clock, sink):
    first = conlog.configure(
        conlog.Logger(
            files=LogFileManager(log_dir, clock=clock),
            sink=sink,
            formatter=MessageFormatter(scheme=plain_scheme(), clock=clock),
        )
    )
    first.info("opened")
    assert first.files.is_open

    second = conlog.configure(conlog.LoggingConfig(log_dir=str(log_dir), color="never"))
    assert second is not first
    assert not first.files.is_open


def test_reset_closes_default(logger):
    conlog.configure(logger)
    logger.info("x")
    conlog.reset()
    assert not logger.files.is_open
