"""Cliente Python para a API de fulfillment service da Tokopedia.

Uso:
    from tokopedia_client import TokopediaClient, create_tokopedia_client

    client = create_tokopedia_client()
    body = client.interaction.get_list_message(shop_id=42)
"""

import logging

from tokopedia_client.client import TokopediaClient, create_tokopedia_client
from tokopedia_client.constants import HttpMethod, MessageFilter, MessageOrder, ProductSort
from tokopedia_client.pipeline import RequestSpec, ServiceConfiguration
from tokopedia_client.services import InteractionService, ProductService
from tokopedia_client.utils.errors import (
    InvalidParameter,
    TokopediaClientError,
    TransportFailure,
)

__all__ = [
    "HttpMethod",
    "InteractionService",
    "InvalidParameter",
    "MessageFilter",
    "MessageOrder",
    "ProductService",
    "ProductSort",
    "RequestSpec",
    "ServiceConfiguration",
    "TokopediaClient",
    "TokopediaClientError",
    "TransportFailure",
    "create_tokopedia_client",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
