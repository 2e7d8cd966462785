"""Operações de chat (interaction) da API Tokopedia."""

from __future__ import annotations

from tokopedia_client.constants.enums import HttpMethod, MessageFilter, MessageOrder
from tokopedia_client.services.base import Endpoint, Resource
from tokopedia_client.validators import MESSAGE_FILTER, MESSAGE_ORDER, PAGINATION

_PAGINATION_CHECKS = (("page", PAGINATION), ("per_page", PAGINATION))

LIST_MESSAGE = Endpoint(
    HttpMethod.GET,
    "/v1/chat/fs/{}/messages",
    query_keys=("shop_id", "page", "per_page", "order", "filter"),
    checks=(*_PAGINATION_CHECKS, ("order", MESSAGE_ORDER), ("filter", MESSAGE_FILTER)),
)
LIST_REPLY = Endpoint(
    HttpMethod.GET,
    "/v1/chat/fs/{}/messages/{:d}/replies",
    query_keys=("shop_id", "page", "per_page", "order"),
    checks=(*_PAGINATION_CHECKS, ("order", MESSAGE_ORDER)),
)
INITIATE_CHAT = Endpoint(
    HttpMethod.GET,
    "/v1/chat/fs/{}/initiate",
    query_keys=("order_id",),
)


class InteractionService(Resource):
    """Mensagens e respostas de chat da loja."""

    __slots__ = ()

    def get_list_message(
        self,
        shop_id: int,
        page: int = 1,
        per_page: int = 10,
        order: MessageOrder | str = MessageOrder.ASC,
        message_filter: MessageFilter | str = MessageFilter.ALL,
    ) -> str:
        """Lista mensagens de chat.

        Args:
            shop_id: ID da loja.
            page: Página atual (> 0).
            per_page: Mensagens por página (> 0).
            order: "asc" ou "desc".
            message_filter: "all", "read" ou "unread" (enviado como `filter`).

        Returns:
            Corpo da resposta.

        Raises:
            InvalidParameter: Paginação <= 0, order ou filter inválidos.
        """
        return self._execute(
            LIST_MESSAGE,
            params={
                "shop_id": shop_id,
                "page": page,
                "per_page": per_page,
                "order": order,
                "filter": message_filter,
            },
        )

    def get_list_reply(
        self,
        message_id: int,
        shop_id: int,
        page: int = 1,
        per_page: int = 10,
        order: MessageOrder | str = MessageOrder.ASC,
    ) -> str:
        """Lista respostas de uma mensagem de chat.

        Raises:
            InvalidParameter: Paginação <= 0 ou order inválido.
        """
        return self._execute(
            LIST_REPLY,
            message_id,
            params={
                "shop_id": shop_id,
                "page": page,
                "per_page": per_page,
                "order": order,
            },
        )

    def initiate_chat(self, order_id: int) -> str:
        """Inicia chat a partir de um pedido."""
        return self._execute(INITIATE_CHAT, params={"order_id": order_id})
