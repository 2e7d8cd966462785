"""Pipeline compartilhado de requisições.

Estágios, na ordem em que cada operação os percorre:
validação -> template de endpoint -> serialização -> despacho -> extração.
"""

from tokopedia_client.pipeline.configuration import ServiceConfiguration
from tokopedia_client.pipeline.dispatcher import RequestSpec, dispatch
from tokopedia_client.pipeline.endpoints import render_endpoint
from tokopedia_client.pipeline.extractor import extract_bytes, extract_contents
from tokopedia_client.pipeline.serializer import (
    build_url,
    passthrough_body,
    serialize_query,
)

__all__ = [
    "RequestSpec",
    "ServiceConfiguration",
    "build_url",
    "dispatch",
    "extract_bytes",
    "extract_contents",
    "passthrough_body",
    "render_endpoint",
    "serialize_query",
]
