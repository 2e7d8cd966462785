"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InvalidParameter,
    TokopediaClientError,
    TransportFailure,
)

__all__ = [
    "InvalidParameter",
    "TokopediaClientError",
    "TransportFailure",
]
