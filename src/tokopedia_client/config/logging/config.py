"""Configuração opcional dos logs da biblioteca.

Atua só no logger "tokopedia_client": handlers do root e da aplicação
ficam intactos. Sem chamada a `configure_logging`, a biblioteca fica
silenciosa (NullHandler) e os records propagam para a aplicação.
"""

from __future__ import annotations

import logging

from tokopedia_client.config.logging.filters import RequestContextFilter
from tokopedia_client.config.logging.formatters import create_json_formatter

LIBRARY_LOGGER = "tokopedia_client"

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

_HANDLER_NAME = "tokopedia_client.json"


def configure_logging(
    level: str = "INFO",
    *,
    handler: logging.Handler | None = None,
    propagate: bool = False,
) -> logging.Handler:
    """Instala um handler JSON no logger da biblioteca.

    Chamadas repetidas substituem apenas o handler instalado aqui.

    Args:
        level: Nível do logger "tokopedia_client".
        handler: Handler de destino. Default: StreamHandler (stderr).
            Recebe o formatter JSON só se ainda não tiver formatter.
        propagate: Se True, records também sobem para os handlers da aplicação.

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    target = handler or logging.StreamHandler()
    target.set_name(_HANDLER_NAME)
    if target.formatter is None:
        target.setFormatter(create_json_formatter())
    if not any(isinstance(f, RequestContextFilter) for f in target.filters):
        target.addFilter(RequestContextFilter())

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(library_logger.handlers):
        if existing.get_name() == _HANDLER_NAME and existing is not target:
            library_logger.removeHandler(existing)
    if target not in library_logger.handlers:
        library_logger.addHandler(target)
    library_logger.setLevel(level_upper)
    library_logger.propagate = propagate
    return target
