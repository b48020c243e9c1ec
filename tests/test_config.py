import logging

import pytest

from arcade_guard.config import DEV_SIGNING_SECRET, GuardConfig
from arcade_guard.errors import ConfigError
from arcade_guard.exporters.memory import InMemoryExporter
from arcade_guard.service import create_service_from_env


def test_defaults_match_policy():
    config = GuardConfig()
    assert config.win_score == 25
    assert config.min_human_interval_ms == 50
    assert config.win_level == 10
    assert config.min_elapsed_ms == 15_000
    assert (config.code_min_delta, config.code_max_delta) == (-5, 15)
    assert config.uses_dev_secret is True


def test_from_env_overrides():
    config = GuardConfig.from_env(
        {
            "SIGNING_SECRET": "prod-secret",
            "WIN_SCORE": "30",
            "ENFORCE_WIN_SCORE": "false",
            "MIN_ELAPSED_MS": "10000",
            "CODE_MAX_DELTA_MINUTES": "10",
            "DISPLAY_TZ": "UTC",
        }
    )
    assert config.signing_secret == b"prod-secret"
    assert config.win_score == 30
    assert config.enforce_win_score is False
    assert config.min_elapsed_ms == 10_000
    assert config.code_max_delta == 10
    assert config.display_tz is not None
    assert config.uses_dev_secret is False


def test_from_env_warns_on_dev_secret(caplog):
    with caplog.at_level(logging.WARNING, logger="arcade_guard.config"):
        config = GuardConfig.from_env({})
    assert config.signing_secret == DEV_SIGNING_SECRET
    assert "SIGNING_SECRET" in caplog.text


@pytest.mark.parametrize(
    "env",
    [
        {"WIN_SCORE": "many"},
        {"ENFORCE_WIN_SCORE": "maybe"},
        {"DISPLAY_TZ": "Mars/Olympus_Mons"},
        {"CODE_MIN_DELTA_MINUTES": "20"},
    ],
)
def test_from_env_rejects_invalid_values(env):
    with pytest.raises(ConfigError):
        GuardConfig.from_env(env)


def test_empty_secret_rejected():
    with pytest.raises(ConfigError):
        GuardConfig(signing_secret=b"")


def test_create_service_from_env_defaults_to_memory(monkeypatch):
    monkeypatch.delenv("ARCADE_GUARD_PG_DSN", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("SIGNING_SECRET", "env-secret")
    monkeypatch.setenv("DISPLAY_TZ", "UTC")
    service = create_service_from_env()
    assert isinstance(service.exporter, InMemoryExporter)
    assert service.config.signing_secret == b"env-secret"
    assert str(service.config.display_tz) == "UTC"
