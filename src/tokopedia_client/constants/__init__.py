"""Constantes de domínio da API Tokopedia."""

from tokopedia_client.constants.enums import (
    HttpMethod,
    MessageFilter,
    MessageOrder,
    ProductSort,
)

__all__ = [
    "HttpMethod",
    "MessageFilter",
    "MessageOrder",
    "ProductSort",
]
