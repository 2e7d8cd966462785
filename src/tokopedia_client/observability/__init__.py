"""Observabilidade: contexto por requisição propagado para os logs."""

from tokopedia_client.observability.context import (
    RequestContext,
    current_request,
    get_request_id,
    request_scope,
)

__all__ = [
    "RequestContext",
    "current_request",
    "get_request_id",
    "request_scope",
]
