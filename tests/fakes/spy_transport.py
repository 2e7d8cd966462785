"""Transporte fake que registra chamadas, sem IO."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tokopedia_client.utils.errors import TransportFailure


@dataclass(frozen=True)
class FakeResponse:
    """Resposta mínima compatível com ResponseHandleProtocol."""

    text: str
    status_code: int = 200

    @property
    def content(self) -> bytes:
        return self.text.encode("utf-8")


@dataclass(frozen=True)
class RecordedCall:
    method: str
    url: str
    body: Any


class SpyTransport:
    """Registra cada request e devolve um corpo fixo (ou levanta falha)."""

    def __init__(
        self,
        body: str = '{"status":"OK"}',
        failure: TransportFailure | None = None,
    ) -> None:
        self._body = body
        self._failure = failure
        self.calls: list[RecordedCall] = []

    def request(self, method: str, url: str, body: Any = None) -> FakeResponse:
        self.calls.append(RecordedCall(method=method, url=url, body=body))
        if self._failure is not None:
            raise self._failure
        return FakeResponse(self._body)

    @property
    def last_call(self) -> RecordedCall:
        return self.calls[-1]
