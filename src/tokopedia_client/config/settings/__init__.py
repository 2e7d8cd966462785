"""Agregador de settings do tokopedia_client."""

from __future__ import annotations

from tokopedia_client.config.settings.tokopedia import (
    TOKOPEDIA_API_BASE_URL,
    TokopediaSettings,
    get_tokopedia_settings,
)

__all__ = [
    "TOKOPEDIA_API_BASE_URL",
    "TokopediaSettings",
    "get_tokopedia_settings",
]
