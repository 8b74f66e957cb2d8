# tests/test_main.py

import logging

import pytest

import cli.main as main
from core.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR


@pytest.fixture
def captured_basic_config(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    return calls


@pytest.mark.parametrize("env_value, expected", [("debug", "DEBUG"), ("info", "INFO")])
def test_configure_logging_reads_level_from_env(
    monkeypatch, captured_basic_config, env_value, expected
):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, env_value)

    main.configure_logging()

    assert captured_basic_config[0]["level"] == expected


@pytest.mark.parametrize("env_value", ["verbose", ""])
def test_configure_logging_unknown_level_falls_back(
    monkeypatch, captured_basic_config, env_value
):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, env_value)

    main.configure_logging()

    assert captured_basic_config[0]["level"] == DEFAULT_LOG_LEVEL


def test_configure_logging_default(monkeypatch, captured_basic_config):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)

    main.configure_logging()

    assert captured_basic_config[0]["level"] == DEFAULT_LOG_LEVEL
