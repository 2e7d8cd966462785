"""Serialização de query string e repasse de body."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

if TYPE_CHECKING:
    from collections.abc import Mapping


def _canonical(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return str(int(value))
    return str(value)


def serialize_query(params: Mapping[str, Any]) -> str:
    """Converte parâmetros em query string preservando a ordem das chaves.

    Enums viram seu valor, inteiros viram decimal; percent-encoding
    segue `urllib.parse.urlencode`.

    Args:
        params: Mapping ordenado (chave -> valor).

    Returns:
        Query string sem o "?" inicial (vazia se não houver parâmetros).
    """
    return urlencode([(key, _canonical(value)) for key, value in params.items()])


def build_url(path: str, params: Mapping[str, Any]) -> str:
    """Junta path e query; query vazia não gera sufixo "?"."""
    query = serialize_query(params)
    return f"{path}?{query}" if query else path


def passthrough_body(data: Any) -> Any:
    """Repassa o payload sem alteração (validação fica com a API remota)."""
    return data
