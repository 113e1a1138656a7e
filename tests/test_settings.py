"""Tests for environment parsing in settings (module reloaded per case)."""

import importlib
import logging

import pytest

import settings


@pytest.fixture
def reload_settings(monkeypatch):
    """Reloads settings with the given env vars; restores the real module afterwards."""

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(settings)

    yield _reload

    monkeypatch.undo()
    importlib.reload(settings)


# ---------------------------------------------------------------------------
# Numeric values
# ---------------------------------------------------------------------------

def test_valid_numbers_are_parsed(reload_settings):
    module = reload_settings(PORT="8080", TRUSTED_PROXY_HOPS="2", LLM_TIMEOUT_SECONDS="7.5")
    assert module.PORT == 8080
    assert module.TRUSTED_PROXY_HOPS == 2
    assert module.LLM_TIMEOUT_SECONDS == 7.5


def test_invalid_number_falls_back_with_warning(reload_settings, caplog):
    with caplog.at_level(logging.WARNING, logger="settings"):
        module = reload_settings(TRUSTED_PROXY_HOPS="abc")

    assert module.TRUSTED_PROXY_HOPS == 1
    assert "TRUSTED_PROXY_HOPS" in caplog.text


def test_invalid_timeout_means_no_timeout(reload_settings):
    module = reload_settings(LLM_TIMEOUT_SECONDS="x", GEO_TIMEOUT_SECONDS="soon")
    assert module.LLM_TIMEOUT_SECONDS is None
    assert module.GEO_TIMEOUT_SECONDS is None


def test_blank_timeout_means_no_timeout(reload_settings):
    module = reload_settings(LLM_TIMEOUT_SECONDS="", GEO_TIMEOUT_SECONDS="   ")
    assert module.LLM_TIMEOUT_SECONDS is None
    assert module.GEO_TIMEOUT_SECONDS is None


def test_geo_timeout_is_parsed(reload_settings):
    module = reload_settings(GEO_TIMEOUT_SECONDS="3")
    assert module.GEO_TIMEOUT_SECONDS == 3.0


# ---------------------------------------------------------------------------
# Log level
# ---------------------------------------------------------------------------

def test_log_level_is_normalised(reload_settings):
    module = reload_settings(LOG_LEVEL=" debug ")
    assert module.LOG_LEVEL == "DEBUG"


def test_unknown_log_level_falls_back_to_info(reload_settings, caplog):
    with caplog.at_level(logging.WARNING, logger="settings"):
        module = reload_settings(LOG_LEVEL="verbose")

    assert module.LOG_LEVEL == "INFO"
    assert "LOG_LEVEL" in caplog.text


def test_allowed_origins_split_on_commas(reload_settings):
    module = reload_settings(ALLOWED_ORIGINS="https://a.example,https://b.example")
    assert module.ALLOWED_ORIGINS == ["https://a.example", "https://b.example"]
