"""Operações de produto da API Tokopedia.

Leitura (info, variantes, etalase) usa GET; criação, status, preço,
estoque e remoção usam POST; edição usa PATCH. Payloads de escrita são
repassados sem validação de schema.
"""

from __future__ import annotations

from typing import Any

from tokopedia_client.constants.enums import HttpMethod, ProductSort
from tokopedia_client.services.base import Endpoint, Resource
from tokopedia_client.validators import PAGINATION, PRODUCT_SORT

_SHOP_QUERY = ("shop_id",)

PRODUCT_INFO = Endpoint(
    HttpMethod.GET,
    "/inventory/v1/fs/{}/product/info",
    query_keys=("product_id", "product_url"),
    optional_keys=frozenset({"product_id", "product_url"}),
)
PRODUCT_INFO_BY_SKU = Endpoint(
    HttpMethod.GET,
    "/inventory/v1/fs/{}/product/info",
    query_keys=("sku",),
)
PRODUCT_INFO_BY_SHOP = Endpoint(
    HttpMethod.GET,
    "/inventory/v1/fs/{}/product/info",
    query_keys=("shop_id", "page", "per_page", "sort"),
    checks=(("page", PAGINATION), ("per_page", PAGINATION), ("sort", PRODUCT_SORT)),
)
VARIANTS_BY_CATEGORY = Endpoint(
    HttpMethod.GET,
    "/inventory/v1/fs/{}/category/get_variant",
    query_keys=("cat_id",),
)
VARIANTS_BY_CATEGORY_V2 = Endpoint(
    HttpMethod.GET,
    "/inventory/v2/fs/{}/category/get_variant",
    query_keys=("cat_id",),
)
VARIANTS_BY_PRODUCT = Endpoint(HttpMethod.GET, "/inventory/v1/fs/{}/product/variant/{:d}")
ETALASE = Endpoint(HttpMethod.GET, "/inventory/v1/fs/{}/product/etalase", query_keys=_SHOP_QUERY)
CREATE_PRODUCTS = Endpoint(HttpMethod.POST, "/v2/products/fs/{}/create", query_keys=_SHOP_QUERY)
CREATE_PRODUCTS_V3 = Endpoint(HttpMethod.POST, "/v3/products/fs/{}/create", query_keys=_SHOP_QUERY)
EDIT_PRODUCT = Endpoint(HttpMethod.PATCH, "/v2/products/fs/{}/edit", query_keys=_SHOP_QUERY)
EDIT_PRODUCT_V3 = Endpoint(HttpMethod.PATCH, "/v3/products/fs/{}/edit", query_keys=_SHOP_QUERY)
UPLOAD_STATUS = Endpoint(HttpMethod.GET, "/v2/products/fs/{}/status/{:d}", query_keys=_SHOP_QUERY)
SET_ACTIVE = Endpoint(HttpMethod.POST, "/v1/products/fs/{}/active", query_keys=_SHOP_QUERY)
SET_INACTIVE = Endpoint(HttpMethod.POST, "/v1/products/fs/{}/inactive", query_keys=_SHOP_QUERY)
UPDATE_PRICE = Endpoint(HttpMethod.POST, "/inventory/v1/fs/{}/price/update", query_keys=_SHOP_QUERY)
UPDATE_STOCK = Endpoint(HttpMethod.POST, "/inventory/v1/fs/{}/stock/update", query_keys=_SHOP_QUERY)
DELETE_PRODUCT = Endpoint(HttpMethod.POST, "/v3/products/fs/{}/delete", query_keys=_SHOP_QUERY)


class ProductService(Resource):
    """Catálogo, variantes e manutenção de produtos da loja."""

    __slots__ = ()

    def get_product_info(self, product_id: int = 0, product_url: str = "") -> str:
        """Busca info de produto, filtrando por ID e/ou URL quando informados."""
        return self._execute(
            PRODUCT_INFO,
            params={"product_id": product_id, "product_url": product_url},
        )

    def get_product_info_by_sku(self, sku: str) -> str:
        return self._execute(PRODUCT_INFO_BY_SKU, params={"sku": sku})

    def get_product_info_from_related_shop_id(
        self,
        shop_id: int,
        page: int,
        per_page: int,
        sort: ProductSort | int = ProductSort.DEFAULT,
    ) -> str:
        """Lista produtos de uma loja com paginação e ordenação.

        Args:
            shop_id: ID da loja.
            page: Página atual (> 0).
            per_page: Itens por página (> 0).
            sort: Código de ordenação (ProductSort, 1..10).

        Raises:
            InvalidParameter: Paginação <= 0 ou sort fora de ProductSort.
        """
        return self._execute(
            PRODUCT_INFO_BY_SHOP,
            params={"shop_id": shop_id, "page": page, "per_page": per_page, "sort": sort},
        )

    def get_all_variants_by_category_id(self, category_id: int) -> str:
        return self._execute(VARIANTS_BY_CATEGORY, params={"cat_id": category_id})

    def get_all_variants_by_category_id_v2(self, category_id: int) -> str:
        return self._execute(VARIANTS_BY_CATEGORY_V2, params={"cat_id": category_id})

    def get_all_variants_by_product_id(self, product_id: int) -> str:
        return self._execute(VARIANTS_BY_PRODUCT, product_id)

    def get_all_etalase(self, shop_id: int) -> str:
        """Lista as etalases (vitrines) da loja."""
        return self._execute(ETALASE, params={"shop_id": shop_id})

    def create_products(self, shop_id: int, data: Any) -> str:
        return self._write(CREATE_PRODUCTS, shop_id, data)

    def create_products_v3(self, shop_id: int, data: Any) -> str:
        return self._write(CREATE_PRODUCTS_V3, shop_id, data)

    def edit_product(self, shop_id: int, data: Any) -> str:
        return self._write(EDIT_PRODUCT, shop_id, data)

    def edit_product_v3(self, shop_id: int, data: Any) -> str:
        return self._write(EDIT_PRODUCT_V3, shop_id, data)

    def check_upload_status(self, shop_id: int, upload_id: int) -> str:
        """Consulta o status de um upload de produtos."""
        return self._execute(UPLOAD_STATUS, upload_id, params={"shop_id": shop_id})

    def set_active_product(self, shop_id: int, data: Any) -> str:
        return self._write(SET_ACTIVE, shop_id, data)

    def set_inactive_product(self, shop_id: int, data: Any) -> str:
        return self._write(SET_INACTIVE, shop_id, data)

    def update_price_only(self, shop_id: int, data: Any) -> str:
        return self._write(UPDATE_PRICE, shop_id, data)

    def update_stock_only(self, shop_id: int, data: Any) -> str:
        return self._write(UPDATE_STOCK, shop_id, data)

    def delete_product(self, shop_id: int, data: Any) -> str:
        """Remove um produto ou lista de produtos."""
        return self._write(DELETE_PRODUCT, shop_id, data)

    def _write(self, endpoint: Endpoint, shop_id: int, data: Any) -> str:
        return self._execute(endpoint, params={"shop_id": shop_id}, body=data)
