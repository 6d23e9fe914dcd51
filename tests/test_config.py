"""Tests for configuration parsing."""

import pytest

from conlog.config import (
    LoggingConfig,
    _parse_config,
    ensure_config_exists,
    get_config_path,
    load_config,
)


def test_defaults():
    """LoggingConfig has expected defaults."""
    config = LoggingConfig()
    assert config.log_dir is None
    assert config.debug is True
    assert config.color == "auto"
    assert config.rotation == "date"


def test_parse_partial_override():
    """Parsing config with some keys uses defaults for the rest."""
    config = _parse_config({"logging": {"debug": False, "rotation": "day"}})

    # Overridden
    assert config.debug is False
    assert config.rotation == "day"

    # Defaults preserved
    assert config.color == "auto"
    assert config.log_dir is None


def test_parse_missing_section():
    assert _parse_config({}) == LoggingConfig()


def test_parse_expands_log_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = _parse_config({"logging": {"log_dir": "~/logs"}})
    assert config.log_dir == str(tmp_path / "logs")


def test_parse_rejects_bad_values():
    with pytest.raises(ValueError):
        _parse_config({"logging": {"color": "rainbow"}})
    with pytest.raises(ValueError):
        _parse_config({"logging": {"rotation": "hourly"}})
    with pytest.raises(ValueError):
        _parse_config({"logging": {"debug": "maybe"}})


def test_config_path_from_env(tmp_path):
    """The autouse fixture points CONLOG_CONFIG into tmp_path."""
    assert get_config_path() == tmp_path / "config.toml"


def test_load_config_missing_file_returns_defaults():
    assert load_config() == LoggingConfig()


def test_load_config_reads_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[logging]\nlog_dir = "/srv/logs"\ncolor = "never"\n')
    config = load_config(path)
    assert config.log_dir == "/srv/logs"
    assert config.color == "never"


def test_load_config_invalid_toml_returns_defaults(tmp_path, capsys):
    path = tmp_path / "config.toml"
    path.write_text("[logging\nnot toml")
    assert load_config(path) == LoggingConfig()
    assert "Could not load config" in capsys.readouterr().out


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text('[logging]\nlog_dir = "/srv/logs"\ndebug = true\n')
    monkeypatch.setenv("CONLOG_LOG_DIR", str(tmp_path / "env-logs"))
    monkeypatch.setenv("CONLOG_DEBUG", "off")

    config = load_config(path)
    assert config.log_dir == str(tmp_path / "env-logs")
    assert config.debug is False


def test_ensure_config_exists_writes_defaults():
    path = ensure_config_exists()
    assert path.exists()
    assert load_config(path) == LoggingConfig()
