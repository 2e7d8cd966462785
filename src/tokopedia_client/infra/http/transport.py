"""Transporte HTTP padrão sobre httpx.

Retries, timeouts e conexão ficam aqui, fora do pipeline: o core só
chama `request()` e recebe um httpx.Response ou um TransportFailure.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import httpx

from tokopedia_client.utils.errors import TransportFailure

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({429})
_IDEMPOTENT_METHODS = frozenset({"GET", "DELETE"})


@dataclass
class HttpClientConfig:
    """Configuração do transporte HTTP."""

    base_url: str
    access_token: str = ""
    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpxTransport:
    """Transporte síncrono que satisfaz TransportProtocol.

    Args:
        config: Configuração de base URL, token e retries.
        client: httpx.Client opcional (testes injetam um com MockTransport).
    """

    def __init__(
        self,
        config: HttpClientConfig,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            verify=config.verify_ssl,
        )

    def request(self, method: str, url: str, body: Any = None) -> httpx.Response:
        """Executa a requisição com retry controlado por verbo.

        GET/DELETE são retentados em 429/5xx, timeout e falha de conexão.
        POST/PATCH só são retentados quando a requisição certamente não
        chegou ao servidor (ConnectError/ConnectTimeout) ou em 429.

        Raises:
            TransportFailure: Status fora de 2xx, falha de rede ou
                tentativas esgotadas.
        """
        headers = self._build_headers()
        idempotent = method.upper() in _IDEMPOTENT_METHODS
        for attempt in range(self._config.max_retries + 1):
            last_attempt = attempt >= self._config.max_retries
            try:
                response = self._client.request(
                    method,
                    url,
                    json=body,
                    headers=headers,
                )
                _raise_for_status(response)
                return response
            except TransportFailure as exc:
                can_repeat = idempotent or exc.status_code in _RETRYABLE_STATUS
                if not exc.is_retryable or not can_repeat or last_attempt:
                    raise
                self._backoff_sleep(attempt)
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                not_sent = isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout))
                if not (idempotent or not_sent):
                    # o servidor pode ter aplicado a escrita
                    raise TransportFailure("http_write_timeout", is_retryable=False) from exc
                if last_attempt:
                    raise TransportFailure("http_connection_error", is_retryable=True) from exc
                self._backoff_sleep(attempt)
            except httpx.TransportError as exc:
                raise TransportFailure("http_transport_error", is_retryable=False) from exc
        raise TransportFailure("http_retry_exhausted", is_retryable=True)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _build_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json", **self._config.default_headers}
        if self._config.access_token:
            headers["Authorization"] = f"Bearer {self._config.access_token}"
        return headers

    def _backoff_sleep(self, attempt: int) -> None:
        backoff = min(
            (2**attempt) * self._config.backoff_base_seconds,
            self._config.backoff_max_seconds,
        )
        logger.info("http_backoff", extra={"attempt": attempt, "backoff_seconds": backoff})
        time.sleep(backoff)


def _raise_for_status(response: httpx.Response) -> None:
    status = response.status_code
    if 200 <= status < 300:
        return
    # 1xx/3xx não são sucesso: httpx não segue redirect por padrão
    retryable = status in _RETRYABLE_STATUS or status >= 500
    raise TransportFailure(
        f"http_status_{status}",
        status_code=status,
        is_retryable=retryable,
    )
