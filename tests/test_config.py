"""Tests for settings loading and logging setup."""

import logging
import os
from unittest import mock

from person_builder import config
from person_builder.config import LOG_FORMAT, Settings, configure_logging, load_settings


def test_defaults_when_environment_empty(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PERSON_BUILDER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PERSON_BUILDER_PHONE_REGION", raising=False)
    assert load_settings() == Settings(log_level="INFO", phone_region="US")


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PERSON_BUILDER_LOG_LEVEL", "debug")
    monkeypatch.setenv("PERSON_BUILDER_PHONE_REGION", "ca")
    assert load_settings() == Settings(log_level="DEBUG", phone_region="CA")


def test_unknown_log_level_falls_back_to_info(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PERSON_BUILDER_LOG_LEVEL", "chatty")
    assert load_settings().log_level == "INFO"


def test_reads_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PERSON_BUILDER_LOG_LEVEL=WARNING\n")
    with mock.patch.dict(os.environ):
        os.environ.pop("PERSON_BUILDER_LOG_LEVEL", None)
        assert load_settings(env_file).log_level == "WARNING"


def test_environment_wins_over_env_file(monkeypatch, tmp_path):
    monkeypatch.setenv("PERSON_BUILDER_LOG_LEVEL", "ERROR")
    env_file = tmp_path / ".env"
    env_file.write_text("PERSON_BUILDER_LOG_LEVEL=WARNING\n")
    assert load_settings(env_file).log_level == "ERROR"


def test_configure_logging_uses_settings(monkeypatch):
    calls = []
    monkeypatch.setattr(config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(Settings(log_level="WARNING"))
    assert calls == [{"format": LOG_FORMAT, "level": "WARNING"}]


def test_configure_logging_loads_settings_when_missing(monkeypatch, tmp_path):
    calls = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PERSON_BUILDER_LOG_LEVEL", "debug")
    monkeypatch.setattr(config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging()
    assert logging.getLevelName(calls[0]["level"]) == logging.DEBUG


def test_unknown_phone_region_falls_back_to_us(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PERSON_BUILDER_PHONE_REGION", "XX")
    assert load_settings().phone_region == "US"
