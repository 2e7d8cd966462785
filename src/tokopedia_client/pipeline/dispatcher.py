"""Despacho de requisições pelo transporte injetado.

Não há retries, timeouts nem interpretação de status aqui: isso é
responsabilidade do transporte. Falhas sobem inalteradas.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from tokopedia_client.constants.enums import HttpMethod
from tokopedia_client.observability import request_scope
from tokopedia_client.pipeline.serializer import build_url
from tokopedia_client.utils.errors import TransportFailure

if TYPE_CHECKING:
    from tokopedia_client.protocols import ResponseHandleProtocol, TransportProtocol

logger = logging.getLogger(__name__)


class RequestSpec(BaseModel):
    """Descrição completa de uma chamada HTTP, pronta para despacho."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    method: HttpMethod = Field(..., description="Verbo HTTP.")
    path: str = Field(..., min_length=1, description="Path já interpolado.")
    query: dict[str, Any] = Field(
        default_factory=dict,
        description="Parâmetros de query na ordem declarada pela operação.",
    )
    body: Any = Field(default=None, description="Payload repassado sem alteração.")

    @property
    def url(self) -> str:
        """Path + query string (sem "?" quando não há query)."""
        return build_url(self.path, self.query)


def dispatch(transport: TransportProtocol, spec: RequestSpec) -> ResponseHandleProtocol:
    """Executa a requisição pelo transporte.

    Args:
        transport: Transporte que implementa TransportProtocol.
        spec: Requisição montada pelo recurso.

    Returns:
        Resposta opaca do transporte.

    Raises:
        TransportFailure: Propagada do transporte sem alteração.
    """
    method = str(spec.method)
    with request_scope(method, spec.path):
        started = time.perf_counter()
        try:
            if spec.method in (HttpMethod.POST, HttpMethod.PATCH):
                response = transport.request(method, spec.url, spec.body)
            else:
                response = transport.request(method, spec.url)
        except TransportFailure as exc:
            logger.warning(
                "tokopedia_request_failed",
                extra={"status_code": exc.status_code, "is_retryable": exc.is_retryable},
            )
            raise
        logger.debug(
            "tokopedia_request_dispatched",
            extra={"elapsed_ms": round((time.perf_counter() - started) * 1000, 2)},
        )
        return response
