"""Formatter JSON dos logs da biblioteca."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

BASE_LOG_FIELDS = ("asctime", "levelname", "name", "message")

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON.

    Atributos extras do record (request_id, http_method, http_path,
    status_code, elapsed_ms...) entram no JSON sem declaração prévia.
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in BASE_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        static_fields={"library": "tokopedia_client"},
    )
