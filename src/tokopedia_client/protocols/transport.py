"""Contratos do transporte HTTP injetado.

O pipeline depende apenas destes protocolos; qualquer cliente que os
satisfaça (httpx, stub de teste) pode ser injetado.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResponseHandleProtocol(Protocol):
    """Resposta opaca devolvida pelo transporte."""

    @property
    def text(self) -> str: ...

    @property
    def content(self) -> bytes: ...


@runtime_checkable
class TransportProtocol(Protocol):
    """Contrato mínimo para o transporte HTTP.

    `url` já vem com path + query, relativo à base configurada no
    transporte. Falhas devem ser levantadas como TransportFailure.
    """

    def request(
        self,
        method: str,
        url: str,
        body: Any = None,
    ) -> ResponseHandleProtocol: ...
