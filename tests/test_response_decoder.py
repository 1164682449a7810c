"""Tests de la decodificación en tres niveles."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from adapters.response_decoder import decode_or_raise
from core.domain.errors import LemonSqueezyAPIError, LemonSqueezyError, UnknownError
from core.domain.models import (
    DataAndIncluded,
    DataIncludedAndMeta,
    Included,
    Meta,
    Order,
    OrderItem,
)

OrderItemResponse = DataAndIncluded[OrderItem, Included]
OrderListResponse = DataIncludedAndMeta[list[Order], Included, Meta]


class TestSuccess:
    def test_single_resource(self, order_item_body: bytes) -> None:
        result = decode_or_raise(OrderItemResponse, order_item_body)

        assert result.data.id == "42"
        assert result.data.type == "order-items"
        assert result.data.attributes.product_name == "Lemonade"
        assert result.data.attributes.price == 1999
        assert result.included is None
        assert result.errors is None

    def test_list_with_meta_and_included(self, orders_page_body: bytes) -> None:
        result = decode_or_raise(OrderListResponse, orders_page_body)

        assert [order.id for order in result.data] == ["1001", "1002"]
        assert result.meta is not None
        assert result.meta.page.current_page == 2
        assert result.meta.page.last_page == 3
        assert result.meta.page.per_page == 5
        assert result.meta.page.from_ == 6
        assert result.meta.page.to == 10
        assert result.meta.page.total == 12
        assert result.included is not None
        assert result.included[0].type == "stores"
        assert result.included[0].attributes["name"] == "Fresh Lemons"
        assert result.links is not None and result.links.first is not None

    def test_partial_failure_keeps_data_and_errors(self) -> None:
        body = json.dumps(
            {
                "data": {"type": "order-items", "id": "1", "attributes": {}},
                "errors": [{"status": "400", "title": "Bad include", "source": {"parameter": "include"}}],
            }
        ).encode()

        result = decode_or_raise(OrderItemResponse, body)

        assert result.data.id == "1"
        assert result.errors is not None
        assert result.errors[0].title == "Bad include"

    def test_status_code_is_not_consulted(self, order_item_body: bytes) -> None:
        result = decode_or_raise(OrderItemResponse, order_item_body, status_code=500)
        assert result.data.id == "42"


class TestApiError:
    def test_structured_error_is_raised(self, not_found_body: bytes) -> None:
        with pytest.raises(LemonSqueezyAPIError) as exc_info:
            decode_or_raise(OrderItemResponse, not_found_body, status_code=404)

        err = exc_info.value
        assert err.status_code == 404
        assert len(err.errors) == 1
        assert err.errors[0].status == "404"
        assert err.errors[0].title == "Not Found"
        assert err.errors[0].detail == "The related resource does not exist."
        assert "[404] The related resource does not exist." in str(err)

    def test_several_errors(self) -> None:
        body = json.dumps(
            {
                "errors": [
                    {"status": "422", "title": "Invalid", "detail": "name is required"},
                    {"status": "422", "title": "Invalid", "detail": "price must be positive"},
                ]
            }
        ).encode()

        with pytest.raises(LemonSqueezyAPIError) as exc_info:
            decode_or_raise(OrderItemResponse, body)

        assert [e.detail for e in exc_info.value.errors] == ["name is required", "price must be positive"]
        assert exc_info.value.status_code is None

    def test_api_error_is_a_lemonsqueezy_error(self, not_found_body: bytes) -> None:
        with pytest.raises(LemonSqueezyError):
            decode_or_raise(OrderItemResponse, not_found_body)


class TestUnknownError:
    def test_text_body(self) -> None:
        body = b"<html><body>502 Bad Gateway</body></html>"

        with pytest.raises(UnknownError) as exc_info:
            decode_or_raise(OrderItemResponse, body, status_code=502)

        err = exc_info.value
        assert err.message == body.decode("utf-8")
        assert err.raw == body
        assert err.status_code == 502

    def test_invalid_utf8_has_no_message(self) -> None:
        body = b"\xff\xfe\xfa\x00binary"

        with pytest.raises(UnknownError) as exc_info:
            decode_or_raise(OrderItemResponse, body)

        assert exc_info.value.message is None
        assert exc_info.value.raw == body

    def test_json_matching_neither_shape(self) -> None:
        body = b'{"message": "Unauthenticated."}'

        with pytest.raises(UnknownError) as exc_info:
            decode_or_raise(OrderItemResponse, body, status_code=401)

        assert exc_info.value.message == '{"message": "Unauthenticated."}'

    def test_empty_error_list_is_not_an_api_error(self) -> None:
        with pytest.raises(UnknownError):
            decode_or_raise(OrderItemResponse, b'{"errors": []}')

    def test_empty_body(self) -> None:
        with pytest.raises(UnknownError) as exc_info:
            decode_or_raise(OrderItemResponse, b"")

        assert exc_info.value.message == ""

    def test_validation_diagnostic_is_preserved(self) -> None:
        body = b'{"data": {"type": "order-items"}}'

        with pytest.raises(UnknownError) as exc_info:
            decode_or_raise(OrderItemResponse, body)

        diagnostic = exc_info.value.validation_error
        assert isinstance(diagnostic, ValidationError)
        assert exc_info.value.__cause__ is diagnostic
        failed_fields = {tuple(error["loc"]) for error in diagnostic.errors()}
        assert ("data", "id") in failed_fields
