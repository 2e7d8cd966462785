"""Validadores de parâmetros da API Tokopedia.

Uso:
    from tokopedia_client.validators import validate, PAGINATION

    validate(PAGINATION, page, param="page")
"""

from tokopedia_client.validators.parameters import validate, validate_all
from tokopedia_client.validators.rules import (
    MESSAGE_FILTER,
    MESSAGE_ORDER,
    PAGINATION,
    PRODUCT_SORT,
    RULES,
    EnumRule,
    PositiveIntRule,
    Rule,
)

__all__ = [
    "MESSAGE_FILTER",
    "MESSAGE_ORDER",
    "PAGINATION",
    "PRODUCT_SORT",
    "RULES",
    "EnumRule",
    "PositiveIntRule",
    "Rule",
    "validate",
    "validate_all",
]
