"""Testes para TokopediaSettings e carga via ambiente."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from tokopedia_client.config.settings import (
    TOKOPEDIA_API_BASE_URL,
    TokopediaSettings,
    get_tokopedia_settings,
)
from tokopedia_client.config.settings.tokopedia import _load_from_env


@pytest.fixture(autouse=True)
def _clear_cache() -> Iterator[None]:
    get_tokopedia_settings.cache_clear()
    yield
    get_tokopedia_settings.cache_clear()


def test_defaults() -> None:
    settings = TokopediaSettings()
    assert settings.api_base_url == TOKOPEDIA_API_BASE_URL
    assert settings.request_timeout_seconds == 30.0
    assert settings.max_retries == 3


def test_validate_settings_reports_missing_credentials() -> None:
    errors = TokopediaSettings().validate_settings()
    assert "TOKOPEDIA_FS_ID não configurado" in errors
    assert "TOKOPEDIA_ACCESS_TOKEN não configurado" in errors


def test_validate_settings_rejects_bad_base_url() -> None:
    settings = TokopediaSettings(fs_id="1", access_token="t", api_base_url="fs.tokopedia.net")
    assert settings.validate_settings() == [
        "TOKOPEDIA_API_BASE_URL deve começar com http:// ou https://"
    ]


def test_non_positive_timeout_rejected() -> None:
    with pytest.raises(ValidationError):
        TokopediaSettings(request_timeout_seconds=0)


def test_load_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOKOPEDIA_FS_ID", " 13004 ")
    monkeypatch.setenv("TOKOPEDIA_ACCESS_TOKEN", "secret")
    monkeypatch.setenv("TOKOPEDIA_MAX_RETRIES", "5")
    monkeypatch.setenv("TOKOPEDIA_REQUEST_TIMEOUT_SECONDS", "12.5")

    settings = _load_from_env()

    assert settings.fs_id == "13004"
    assert settings.access_token == "secret"
    assert settings.max_retries == 5
    assert settings.request_timeout_seconds == 12.5
    assert settings.validate_settings() == []


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOKOPEDIA_FS_ID", "1")
    assert get_tokopedia_settings() is get_tokopedia_settings()
