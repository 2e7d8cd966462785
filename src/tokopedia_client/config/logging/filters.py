"""Filter que anexa o contexto da requisição aos records de log."""

from __future__ import annotations

import logging

from tokopedia_client.observability import current_request

CONTEXT_FIELDS = ("request_id", "http_method", "http_path")


class RequestContextFilter(logging.Filter):
    """Injeta request_id, http_method e http_path do dispatch em andamento.

    Fora de um dispatch os campos ficam vazios. Valores passados via
    `extra` têm precedência. Query string e body nunca entram no log.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        context = current_request()
        values = (
            (context.request_id, context.method, context.path) if context else ("", "", "")
        )
        for name, value in zip(CONTEXT_FIELDS, values, strict=True):
            if not getattr(record, name, None):
                setattr(record, name, value)
        return True
