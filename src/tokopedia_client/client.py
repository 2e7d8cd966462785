"""Fachada do cliente Tokopedia.

Agrupa os recursos sobre uma única ServiceConfiguration e oferece uma
factory que monta o transporte httpx a partir de TokopediaSettings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tokopedia_client.infra.http import HttpClientConfig, HttpxTransport
from tokopedia_client.pipeline import ServiceConfiguration
from tokopedia_client.services import InteractionService, ProductService

if TYPE_CHECKING:
    from tokopedia_client.config.settings import TokopediaSettings
    from tokopedia_client.protocols import TransportProtocol

logger = logging.getLogger(__name__)


class TokopediaClient:
    """Ponto de entrada para as operações da API.

    Example:
        client = TokopediaClient(fulfillment_service_id="13004", transport=transport)
        client.product.get_product_info(product_id=15)
    """

    def __init__(
        self,
        fulfillment_service_id: str | int,
        transport: TransportProtocol,
    ) -> None:
        self._config = ServiceConfiguration(
            fulfillment_service_id=fulfillment_service_id,
            transport=transport,
        )
        self.product = ProductService(self._config)
        self.interaction = InteractionService(self._config)

    @property
    def config(self) -> ServiceConfiguration:
        return self._config


def create_tokopedia_client(settings: TokopediaSettings | None = None) -> TokopediaClient:
    """Factory para criar o cliente com transporte httpx padrão.

    Args:
        settings: TokopediaSettings opcional. Se None, carrega do ambiente.

    Raises:
        ValueError: Se as settings mínimas não estiverem configuradas.
    """
    # Import local: settings só é necessário quando a factory é usada
    from tokopedia_client.config.settings import get_tokopedia_settings

    tokopedia = settings or get_tokopedia_settings()
    errors = tokopedia.validate_settings()
    if errors:
        raise ValueError("; ".join(errors))

    transport = HttpxTransport(
        HttpClientConfig(
            base_url=tokopedia.api_base_url,
            access_token=tokopedia.access_token,
            timeout_seconds=tokopedia.request_timeout_seconds,
            max_retries=tokopedia.max_retries,
            backoff_base_seconds=tokopedia.backoff_base_seconds,
            backoff_max_seconds=tokopedia.backoff_max_seconds,
        )
    )
    logger.info("tokopedia_client_created", extra={"base_url": tokopedia.api_base_url})
    return TokopediaClient(tokopedia.fs_id, transport)
