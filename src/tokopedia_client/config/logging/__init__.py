"""Logs JSON opcionais para o logger "tokopedia_client".

Uso:
    from tokopedia_client.config.logging import configure_logging

    configure_logging(level="DEBUG")
    # {"level": "DEBUG", "logger": "tokopedia_client.pipeline.dispatcher",
    #  "message": "tokopedia_request_dispatched", "request_id": "...",
    #  "http_method": "GET", "http_path": "/v1/chat/fs/13004/messages", ...}
"""

from tokopedia_client.config.logging.config import LIBRARY_LOGGER, configure_logging
from tokopedia_client.config.logging.filters import CONTEXT_FIELDS, RequestContextFilter
from tokopedia_client.config.logging.formatters import FIELD_RENAME_MAP, create_json_formatter

__all__ = [
    "CONTEXT_FIELDS",
    "FIELD_RENAME_MAP",
    "LIBRARY_LOGGER",
    "RequestContextFilter",
    "configure_logging",
    "create_json_formatter",
]
