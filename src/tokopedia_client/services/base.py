"""Base declarativa dos recursos da API.

Cada operação pública é um `Endpoint` (verbo, template, ordem das chaves
de query, checagens) executado pelo mesmo pipeline em `Resource._execute`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tokopedia_client.constants.enums import HttpMethod
from tokopedia_client.pipeline import (
    RequestSpec,
    dispatch,
    extract_contents,
    passthrough_body,
    render_endpoint,
)
from tokopedia_client.validators import validate_all

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tokopedia_client.pipeline import ServiceConfiguration


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Configuração de uma operação da API.

    Attributes:
        method: Verbo HTTP.
        template: Template de path (primeiro slot é o fs_id).
        query_keys: Chaves de query na ordem enviada.
        optional_keys: Chaves omitidas quando o valor é vazio (0, "", None).
        checks: Pares (parâmetro, regra) validados antes do despacho.
    """

    method: HttpMethod
    template: str
    query_keys: tuple[str, ...] = ()
    optional_keys: frozenset[str] = field(default_factory=frozenset)
    checks: tuple[tuple[str, str], ...] = ()


class Resource:
    """Grupo de operações que compartilham uma ServiceConfiguration."""

    __slots__ = ("_config",)

    def __init__(self, config: ServiceConfiguration) -> None:
        self._config = config

    @property
    def config(self) -> ServiceConfiguration:
        return self._config

    def _execute(
        self,
        endpoint: Endpoint,
        *path_args: Any,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> str:
        """Roda validação, template, serialização, despacho e extração.

        Raises:
            InvalidParameter: Antes de qualquer chamada ao transporte.
            TransportFailure: Propagada do transporte.
        """
        params = params or {}
        validate_all((name, rule, params[name]) for name, rule in endpoint.checks)

        path = render_endpoint(endpoint.template, self._config.fulfillment_service_id, *path_args)
        query: dict[str, Any] = {}
        for key in endpoint.query_keys:
            value = params[key]
            # Omite só 0 e "": a string "0" é um filtro válido e segue na query.
            if key in endpoint.optional_keys and not value:
                continue
            query[key] = value

        spec = RequestSpec(
            method=endpoint.method,
            path=path,
            query=query,
            body=passthrough_body(body),
        )
        response = dispatch(self._config.transport, spec)
        return extract_contents(response)
