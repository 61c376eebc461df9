"""Tests for configuration loading and logging setup."""

import json

import pydantic
import pytest
import structlog

from network_as_code import config


def _write(tmp_path, data: dict):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    return path


def test_load_config_defaults(tmp_path):
    """Only the token is required; the rest has defaults."""
    cfg = config.load_config(str(_write(tmp_path, {"token": "abc"})))
    assert cfg.token == "abc"
    assert cfg.dev_mode is False
    assert cfg.timeout == 30.0
    assert cfg.log_level == "INFO"


def test_load_config_from_env_path(tmp_path, monkeypatch):
    """Without an explicit path, NAC_CONFIG_PATH is used."""
    path = _write(tmp_path, {"token": "abc", "dev_mode": True})
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(path))
    assert config.load_config().dev_mode is True


def test_token_from_env(tmp_path, monkeypatch):
    """The token falls back to NAC_TOKEN."""
    monkeypatch.setenv(config.TOKEN_ENV_VAR, "from-env")
    cfg = config.load_config(str(_write(tmp_path, {})))
    assert cfg.token == "from-env"


def test_missing_token_rejected(tmp_path, monkeypatch):
    """A config without any token is invalid."""
    monkeypatch.delenv(config.TOKEN_ENV_VAR, raising=False)
    with pytest.raises(pydantic.ValidationError, match="token"):
        config.load_config(str(_write(tmp_path, {})))


def test_non_positive_timeout_rejected(tmp_path):
    """Timeout must be positive."""
    with pytest.raises(pydantic.ValidationError):
        config.load_config(str(_write(tmp_path, {"token": "abc", "timeout": 0})))


def test_missing_file(tmp_path):
    """A path that does not exist raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        config.load_config(str(tmp_path / "missing.json"))


def test_no_path_at_all(monkeypatch):
    """No path and no env var raises FileNotFoundError."""
    monkeypatch.delenv(config.CONFIG_ENV_VAR, raising=False)
    with pytest.raises(FileNotFoundError, match=config.CONFIG_ENV_VAR):
        config.load_config()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture
def unconfigured_structlog():
    """Start and end with structlog's default configuration."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


def test_configure_logging_renders_logfmt(capsys, unconfigured_structlog):
    """Configured loggers print logfmt lines with level and message first."""
    assert config.configure_logging("debug")
    structlog.get_logger("test").info("Hello", slice_name="a")

    out = capsys.readouterr().out
    assert "level=info" in out
    assert "msg=Hello" in out
    assert "slice_name=a" in out


def test_configure_logging_renders_json(capsys, unconfigured_structlog):
    """The json format prints one JSON object per line."""
    config.configure_logging("info", "json")
    structlog.get_logger("test").info("Hello", slice_name="a")

    line = json.loads(capsys.readouterr().out.strip())
    assert line["msg"] == "Hello"
    assert line["level"] == "info"
    assert line["slice_name"] == "a"


def test_configure_logging_keeps_application_config(capsys, unconfigured_structlog):
    """An application's own structlog setup is not replaced."""
    config.configure_logging("info", "json")

    assert not config.configure_logging("info", "logfmt")
    structlog.get_logger("test").info("Hello")

    assert json.loads(capsys.readouterr().out.strip())["msg"] == "Hello"


def test_configure_logging_force_replaces(capsys, unconfigured_structlog):
    """force replaces an existing configuration."""
    config.configure_logging("info", "json")

    assert config.configure_logging("info", "logfmt", force=True)
    structlog.get_logger("test").info("Hello")

    assert "msg=Hello" in capsys.readouterr().out


def test_log_format_validated(tmp_path):
    """Only logfmt and json are accepted log formats."""
    path = _write(tmp_path, {"token": "abc", "log_format": "xml"})
    with pytest.raises(pydantic.ValidationError):
        config.load_config(str(path))
