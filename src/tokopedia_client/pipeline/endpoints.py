"""Renderização de templates de endpoint.

Templates usam substituição posicional: o primeiro `{}` recebe o fs_id,
os demais (`{:d}`) recebem IDs numéricos em decimal.
"""

from __future__ import annotations

from typing import Any


def render_endpoint(template: str, fulfillment_service_id: str | int, *path_args: Any) -> str:
    """Interpola fs_id e argumentos de path no template.

    Args:
        template: Ex: "/v1/chat/fs/{}/messages/{:d}/replies".
        fulfillment_service_id: Identidade do fulfillment service.
        *path_args: Argumentos de path na ordem do template.

    Returns:
        Path renderizado, sem query string.
    """
    return template.format(fulfillment_service_id, *path_args)
