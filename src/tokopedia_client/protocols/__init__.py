"""Protocolos e contratos do pipeline."""

from .transport import ResponseHandleProtocol, TransportProtocol

__all__ = [
    "ResponseHandleProtocol",
    "TransportProtocol",
]
