"""Testes para ProductService."""

from __future__ import annotations

from typing import Any

import pytest

from tests.fakes.spy_transport import SpyTransport
from tokopedia_client.constants import ProductSort
from tokopedia_client.pipeline import ServiceConfiguration
from tokopedia_client.services import ProductService
from tokopedia_client.utils.errors import InvalidParameter, TransportFailure


@pytest.fixture
def service(service_config: ServiceConfiguration) -> ProductService:
    return ProductService(service_config)


class TestGetProductInfo:
    """Filtros opcionais são omitidos quando vazios."""

    def test_defaults_produce_no_query(
        self, service: ProductService, spy_transport: SpyTransport
    ) -> None:
        service.get_product_info()
        assert spy_transport.last_call.url == "/inventory/v1/fs/13004/product/info"

    def test_product_id_only(self, service: ProductService, spy_transport: SpyTransport) -> None:
        service.get_product_info(product_id=15)
        assert spy_transport.last_call.url == "/inventory/v1/fs/13004/product/info?product_id=15"

    def test_product_id_and_url(
        self, service: ProductService, spy_transport: SpyTransport
    ) -> None:
        service.get_product_info(15, "https://tokopedia.com/p/1")
        assert spy_transport.last_call.url == (
            "/inventory/v1/fs/13004/product/info"
            "?product_id=15&product_url=https%3A%2F%2Ftokopedia.com%2Fp%2F1"
        )

    def test_string_zero_url_is_sent(
        self, service: ProductService, spy_transport: SpyTransport
    ) -> None:
        service.get_product_info(product_url="0")
        assert spy_transport.last_call.url == "/inventory/v1/fs/13004/product/info?product_url=0"

    def test_zero_product_id_is_omitted(
        self, service: ProductService, spy_transport: SpyTransport
    ) -> None:
        service.get_product_info(product_id=0, product_url="https://tokopedia.com/p/1")
        assert spy_transport.last_call.url == (
            "/inventory/v1/fs/13004/product/info?product_url=https%3A%2F%2Ftokopedia.com%2Fp%2F1"
        )


def test_get_product_info_by_sku(service: ProductService, spy_transport: SpyTransport) -> None:
    service.get_product_info_by_sku("SKU-001")
    assert spy_transport.last_call.url == "/inventory/v1/fs/13004/product/info?sku=SKU-001"


class TestRelatedShop:
    """Testes para get_product_info_from_related_shop_id."""

    def test_valid_request(self, service: ProductService, spy_transport: SpyTransport) -> None:
        service.get_product_info_from_related_shop_id(1, 2, 50, ProductSort.LOWEST_PRICE)
        assert spy_transport.last_call.url == (
            "/inventory/v1/fs/13004/product/info?shop_id=1&page=2&per_page=50&sort=6"
        )

    def test_zero_page_raises_without_dispatch(
        self, service: ProductService, spy_transport: SpyTransport
    ) -> None:
        with pytest.raises(InvalidParameter) as exc_info:
            service.get_product_info_from_related_shop_id(shop_id=1, page=0, per_page=10, sort=1)
        assert exc_info.value.rule == "pagination"
        assert spy_transport.calls == []

    @pytest.mark.parametrize("sort", [0, 11, -1])
    def test_invalid_sort_raises_without_dispatch(
        self, service: ProductService, spy_transport: SpyTransport, sort: int
    ) -> None:
        with pytest.raises(InvalidParameter) as exc_info:
            service.get_product_info_from_related_shop_id(1, 1, 10, sort)
        assert exc_info.value.rule == "product_sort"
        assert spy_transport.calls == []


@pytest.mark.parametrize(
    ("method_name", "expected_url"),
    [
        (
            "get_all_variants_by_category_id",
            "/inventory/v1/fs/13004/category/get_variant?cat_id=99",
        ),
        (
            "get_all_variants_by_category_id_v2",
            "/inventory/v2/fs/13004/category/get_variant?cat_id=99",
        ),
        ("get_all_variants_by_product_id", "/inventory/v1/fs/13004/product/variant/99"),
        ("get_all_etalase", "/inventory/v1/fs/13004/product/etalase?shop_id=99"),
    ],
)
def test_single_argument_reads(
    service: ProductService,
    spy_transport: SpyTransport,
    method_name: str,
    expected_url: str,
) -> None:
    getattr(service, method_name)(99)
    assert spy_transport.last_call.method == "GET"
    assert spy_transport.last_call.url == expected_url


def test_check_upload_status(service: ProductService, spy_transport: SpyTransport) -> None:
    service.check_upload_status(shop_id=42, upload_id=31337)
    assert spy_transport.last_call.method == "GET"
    assert spy_transport.last_call.url == "/v2/products/fs/13004/status/31337?shop_id=42"


@pytest.mark.parametrize(
    ("method_name", "verb", "path"),
    [
        ("create_products", "POST", "/v2/products/fs/13004/create"),
        ("create_products_v3", "POST", "/v3/products/fs/13004/create"),
        ("edit_product", "PATCH", "/v2/products/fs/13004/edit"),
        ("edit_product_v3", "PATCH", "/v3/products/fs/13004/edit"),
        ("set_active_product", "POST", "/v1/products/fs/13004/active"),
        ("set_inactive_product", "POST", "/v1/products/fs/13004/inactive"),
        ("update_price_only", "POST", "/inventory/v1/fs/13004/price/update"),
        ("update_stock_only", "POST", "/inventory/v1/fs/13004/stock/update"),
        ("delete_product", "POST", "/v3/products/fs/13004/delete"),
    ],
)
def test_writes_pass_body_through(
    service: ProductService,
    spy_transport: SpyTransport,
    method_name: str,
    verb: str,
    path: str,
) -> None:
    payload: dict[str, Any] = {"product_id": [1, 2, 3]}

    result = getattr(service, method_name)(42, payload)

    assert result == '{"status":"OK"}'
    call = spy_transport.last_call
    assert call.method == verb
    assert call.url == f"{path}?shop_id=42"
    assert call.body is payload


def test_transport_failure_propagates(service_config: ServiceConfiguration) -> None:
    failure = TransportFailure("http_status_401", status_code=401)
    config = ServiceConfiguration(
        fulfillment_service_id=service_config.fulfillment_service_id,
        transport=SpyTransport(failure=failure),
    )

    with pytest.raises(TransportFailure) as exc_info:
        ProductService(config).get_all_etalase(1)

    assert exc_info.value.status_code == 401
    assert not isinstance(exc_info.value, InvalidParameter)
