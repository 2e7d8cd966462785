"""Transporte HTTP padrão (httpx)."""

from tokopedia_client.infra.http.transport import HttpClientConfig, HttpxTransport

__all__ = [
    "HttpClientConfig",
    "HttpxTransport",
]
