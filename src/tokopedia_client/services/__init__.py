"""Recursos da API Tokopedia construídos sobre o pipeline compartilhado."""

from tokopedia_client.services.base import Endpoint, Resource
from tokopedia_client.services.interaction import InteractionService
from tokopedia_client.services.product import ProductService

__all__ = [
    "Endpoint",
    "InteractionService",
    "ProductService",
    "Resource",
]
