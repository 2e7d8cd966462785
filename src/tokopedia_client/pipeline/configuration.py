"""Configuração imutável compartilhada pelos recursos."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tokopedia_client.protocols import TransportProtocol


@dataclass(frozen=True, slots=True)
class ServiceConfiguration:
    """Identidade do fulfillment service + transporte.

    Criada uma vez na construção do cliente e lida por todos os recursos.
    Frozen: uma identidade trocada no meio do caminho invalidaria
    requisições já montadas.

    Attributes:
        fulfillment_service_id: ID opaco emitido pela Tokopedia (fs_id).
        transport: Transporte HTTP injetado.
    """

    fulfillment_service_id: str | int
    transport: TransportProtocol

    def __post_init__(self) -> None:
        fs_id = self.fulfillment_service_id
        if fs_id is None or fs_id == "" or isinstance(fs_id, bool):
            raise ValueError("fulfillment_service_id é obrigatório")
        if isinstance(fs_id, int) and fs_id <= 0:
            raise ValueError(f"fulfillment_service_id deve ser positivo: {fs_id}")
