"""Tests for the conlog command line."""

import pytest

import conlog
from conlog.cli import main


def test_strip_file(tmp_path, capsys):
    captured = tmp_path / "session.txt"
    captured.write_text("\x1b[32mok\x1b[0m done\n")
    main(["strip", str(captured)])
    assert capsys.readouterr().out == "ok done\n"


def test_strip_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["strip", str(tmp_path / "missing.txt")])
    assert exc.value.code == 1


def test_emit_logs_through_default(logger, sink, log_dir):
    conlog.configure(logger)
    main(["emit", "error", "failed: %s", "disk full"])
    assert sink.getvalue() == "\r[10:30:00] [err] failed: disk full\n"
    assert (log_dir / "log_2024-01-15.txt").read_text() == "10:30:00 failed: disk full\n"


def test_emit_debug_respects_flag(logger, sink):
    conlog.configure(logger)
    logger.set_debug_enabled(False)
    main(["emit", "debug", "quiet"])
    assert sink.getvalue() == ""


def test_emit_unknown_level_exits(logger):
    conlog.configure(logger)
    with pytest.raises(SystemExit) as exc:
        main(["emit", "verbose", "x"])
    assert exc.value.code == 2


def test_raw_adds_newline_unless_told_not_to(logger, sink):
    conlog.configure(logger)
    main(["raw", "plain"])
    main(["raw", "-n", "tail"])
    assert sink.getvalue() == "plain\ntail"


def test_path_prints_log_dir(logger, log_dir, capsys):
    conlog.configure(logger)
    main(["path"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == str(log_dir)
    assert out[1].startswith(str(log_dir / "log_"))


def test_config_init_and_path(tmp_path, capsys):
    main(["config", "init"])
    assert (tmp_path / "config.toml").exists()
    main(["config", "path"])
    assert str(tmp_path / "config.toml") in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    main([])
    assert "usage: conlog" in capsys.readouterr().out
