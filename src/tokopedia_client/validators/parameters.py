"""Validação de parâmetros antes de qualquer I/O de rede."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tokopedia_client.utils.errors import InvalidParameter
from tokopedia_client.validators.rules import PAGINATION, RULES

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

_MESSAGES = {
    PAGINATION: "'{param}' must be larger than zero",
}


def validate(rule_name: str, value: Any, *, param: str | None = None) -> None:
    """Valida um valor contra a regra nomeada.

    Args:
        rule_name: Nome registrado em RULES.
        value: Valor recebido do chamador.
        param: Nome do parâmetro (apenas para mensagem de erro).

    Raises:
        InvalidParameter: Se o valor não é aceito pela regra.
        KeyError: Se a regra não existe (erro de programação).
    """
    rule = RULES[rule_name]
    if rule.accepts(value):
        return

    template = _MESSAGES.get(rule_name, "Invalid {rule} for '{param}': {value!r}")
    message = template.format(rule=rule_name, param=param or rule_name, value=value)
    logger.debug(
        "parameter_rejected",
        extra={"rule": rule_name, "param": param or rule_name},
    )
    raise InvalidParameter(rule_name, value, message)


def validate_all(checks: Iterable[tuple[str, str, Any]]) -> None:
    """Roda todas as checagens na ordem declarada.

    Args:
        checks: Tuplas (param, rule_name, value).

    Raises:
        InvalidParameter: Na primeira violação encontrada.
    """
    for param, rule_name, value in checks:
        validate(rule_name, value, param=param)
