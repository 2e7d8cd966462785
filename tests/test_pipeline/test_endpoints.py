"""Testes para renderização de templates de endpoint."""

from __future__ import annotations

import pytest

from tokopedia_client.pipeline import render_endpoint


def test_renders_fs_id_only() -> None:
    assert render_endpoint("/v1/chat/fs/{}/messages", "13004") == "/v1/chat/fs/13004/messages"


def test_renders_numeric_path_args_as_decimal() -> None:
    path = render_endpoint("/v1/chat/fs/{}/messages/{:d}/replies", 13004, 987654321)
    assert path == "/v1/chat/fs/13004/messages/987654321/replies"


def test_rendering_is_deterministic() -> None:
    template = "/v2/products/fs/{}/status/{:d}"
    first = render_endpoint(template, "abc", 7)
    second = render_endpoint(template, "abc", 7)
    assert first == second == "/v2/products/fs/abc/status/7"


def test_non_integer_for_decimal_slot_fails() -> None:
    with pytest.raises(ValueError):
        render_endpoint("/inventory/v1/fs/{}/product/variant/{:d}", "1", "abc")
