"""Regras fechadas de validação de parâmetros.

Cada regra responde apenas "aceita ou não"; a decisão de levantar erro
fica em `validators.parameters`.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Protocol

from tokopedia_client.constants.enums import MessageFilter, MessageOrder, ProductSort

PAGINATION = "pagination"
MESSAGE_ORDER = "message_order"
MESSAGE_FILTER = "message_filter"
PRODUCT_SORT = "product_sort"


class Rule(Protocol):
    """Contrato mínimo de uma regra de parâmetro."""

    name: str

    def accepts(self, value: Any) -> bool: ...


@dataclass(frozen=True, slots=True)
class PositiveIntRule:
    """Inteiro estritamente positivo (bool não conta como inteiro)."""

    name: str

    def accepts(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return value > 0


@dataclass(frozen=True, slots=True)
class EnumRule:
    """Conjunto fechado de valores aceitos.

    Attributes:
        name: Nome da regra (usado em InvalidParameter.rule).
        members: Valores aceitos. Membros de StrEnum/IntEnum comparam
            igual ao valor bruto, então "asc" e MessageOrder.ASC passam.
    """

    name: str
    members: frozenset[Any]

    def accepts(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            return False
        return value in self.members


RULES: MappingProxyType[str, Rule] = MappingProxyType(
    {
        PAGINATION: PositiveIntRule(PAGINATION),
        MESSAGE_ORDER: EnumRule(MESSAGE_ORDER, frozenset(MessageOrder)),
        MESSAGE_FILTER: EnumRule(MESSAGE_FILTER, frozenset(MessageFilter)),
        PRODUCT_SORT: EnumRule(PRODUCT_SORT, frozenset(ProductSort)),
    }
)
