"""Extração uniforme do conteúdo da resposta."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tokopedia_client.protocols import ResponseHandleProtocol


def extract_contents(response: ResponseHandleProtocol) -> str:
    """Retorna o corpo da resposta como texto, sem parsing por endpoint."""
    return response.text


def extract_bytes(response: ResponseHandleProtocol) -> bytes:
    """Retorna o corpo bruto da resposta."""
    return response.content
