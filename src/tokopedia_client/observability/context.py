"""Contexto da requisição em andamento.

O dispatcher abre um `request_scope` por chamada ao transporte; logs
emitidos dentro dele (inclusive os de backoff do transporte) recebem
request_id, método e path via RequestContextFilter.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Identifica uma chamada à API nos logs (sem query nem body)."""

    request_id: str
    method: str
    path: str


_current: ContextVar[RequestContext | None] = ContextVar("tokopedia_request", default=None)


def current_request() -> RequestContext | None:
    """Contexto da chamada em andamento, ou None fora de um dispatch."""
    return _current.get()


def get_request_id() -> str:
    context = _current.get()
    return context.request_id if context else ""


@contextmanager
def request_scope(method: str, path: str) -> Iterator[RequestContext]:
    """Vincula um novo RequestContext ao contexto atual durante o bloco."""
    context = RequestContext(request_id=uuid.uuid4().hex, method=method, path=path)
    token = _current.set(context)
    try:
        yield context
    finally:
        _current.reset(token)
