import dataclasses

import pytest

from core.config import DEFAULT_BASE_URL, Settings, env


def test_defaults(monkeypatch):
    for key in ("ROGERROGER_API_KEY", "ROGERROGER_BASE_URL", "ROGERROGER_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
    s = Settings.from_env()
    assert s.api_key == ""
    assert s.base_url == DEFAULT_BASE_URL == "https://api.rogerroger.io"
    assert s.timeout == 30.0


def test_from_env(monkeypatch):
    monkeypatch.setenv("ROGERROGER_API_KEY", " rr_abc ")
    monkeypatch.setenv("ROGERROGER_BASE_URL", "https://staging.rogerroger.io/")
    monkeypatch.setenv("ROGERROGER_TIMEOUT", "5")
    s = Settings.from_env()
    assert s.api_key == "rr_abc"
    assert s.base_url == "https://staging.rogerroger.io"
    assert s.timeout == 5.0


def test_blank_values_count_as_unset(monkeypatch):
    monkeypatch.setenv("ROGERROGER_BASE_URL", "   ")
    assert env("ROGERROGER_BASE_URL", "fallback") == "fallback"
    assert Settings.from_env().base_url == DEFAULT_BASE_URL


def test_settings_are_immutable():
    s = Settings(api_key="k")
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.api_key = "other"
