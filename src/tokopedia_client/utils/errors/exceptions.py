"""Exceções públicas do cliente Tokopedia.

Separa erros de entrada (corrigíveis pelo chamador, nunca retentados)
de falhas de transporte (rede, status HTTP não-sucesso).
"""

from __future__ import annotations

from typing import Any


class TokopediaClientError(Exception):
    """Base para todos os erros levantados pela biblioteca."""


class InvalidParameter(TokopediaClientError, ValueError):
    """Parâmetro rejeitado antes de qualquer chamada de rede.

    Attributes:
        rule: Nome da regra violada (ex: "pagination", "product_sort").
        value: Valor recebido do chamador.
    """

    def __init__(self, rule: str, value: Any, message: str | None = None) -> None:
        super().__init__(message or f"Invalid value for rule '{rule}': {value!r}")
        self.rule = rule
        self.value = value


class TransportFailure(TokopediaClientError):
    """Falha originada no transporte (conectividade ou status não-2xx).

    O pipeline propaga este erro sem reinterpretar o status.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable
