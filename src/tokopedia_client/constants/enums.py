"""Enums de domínio para parâmetros aceitos pela API Tokopedia."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class HttpMethod(StrEnum):
    """Verbos HTTP suportados pelo pipeline de requisições."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class MessageOrder(StrEnum):
    """Ordenação de mensagens de chat."""

    ASC = "asc"
    DESC = "desc"


class MessageFilter(StrEnum):
    """Filtro de mensagens de chat por estado de leitura."""

    ALL = "all"
    READ = "read"
    UNREAD = "unread"


class ProductSort(IntEnum):
    """Códigos de ordenação da listagem de produtos por loja."""

    DEFAULT = 1
    LAST_UPDATE_PRODUCT = 2
    HIGHEST_SOLD = 3
    LOWEST_SOLD = 4
    HIGHEST_PRICE = 5
    LOWEST_PRICE = 6
    PRODUCT_NAME_ASCENDING = 7
    PRODUCT_NAME_DESCENDING = 8
    FEWEST_STOCK = 9
    HIGHEST_STOCK = 10
