"""Tests for logfire configuration."""

import logfire

from credit_api_client.config.settings import Settings
from credit_api_client.observability import configure_logging


def _record_logfire_calls(monkeypatch):
    calls = {"configure": [], "instrument_httpx": 0}

    def configure(**kwargs):
        calls["configure"].append(kwargs)

    def instrument_httpx():
        calls["instrument_httpx"] += 1

    monkeypatch.setattr(logfire, "configure", configure)
    monkeypatch.setattr(logfire, "instrument_httpx", instrument_httpx)
    return calls


def test_token_enables_httpx_instrumentation(monkeypatch):
    """With a token, logfire exports and httpx requests are instrumented."""
    calls = _record_logfire_calls(monkeypatch)

    configure_logging(Settings(logfire_token="token", logfire_environment="ci"))

    assert calls["instrument_httpx"] == 1
    assert calls["configure"][0]["token"] == "token"
    assert calls["configure"][0]["environment"] == "ci"
    assert calls["configure"][0]["console"] is False


def test_no_token_skips_httpx_instrumentation(monkeypatch):
    """Without a token, logfire is configured locally and httpx is left alone."""
    calls = _record_logfire_calls(monkeypatch)

    configure_logging(Settings(logfire_token=""))

    assert calls["instrument_httpx"] == 0
    assert calls["configure"][0]["token"] is None
    assert calls["configure"][0]["send_to_logfire"] == "if-token-present"
