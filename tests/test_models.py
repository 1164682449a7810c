"""Tests de envelopes y exportación JSON."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from adapters.json_exporter import dump_envelope, export_envelope_json
from core.domain.models import (
    APIErrorDocument,
    DataAndIncluded,
    DataIncludedAndMeta,
    Included,
    Meta,
    Order,
    Product,
    Store,
)

StoreResponse = DataAndIncluded[Store, Included]
ProductListResponse = DataIncludedAndMeta[list[Product], Included, Meta]
OrderListResponse = DataIncludedAndMeta[list[Order], Included, Meta]


class TestEnvelopes:
    def test_data_is_required(self) -> None:
        with pytest.raises(ValidationError):
            StoreResponse.model_validate({"included": []})

    def test_optional_fields_default_to_none(self) -> None:
        envelope = ProductListResponse.model_validate({"data": []})

        assert envelope.data == []
        assert envelope.meta is None
        assert envelope.included is None
        assert envelope.errors is None
        assert envelope.links is None

    def test_single_envelope_rejects_list_data(self) -> None:
        with pytest.raises(ValidationError):
            StoreResponse.model_validate({"data": [{"type": "stores", "id": "1", "attributes": {}}]})

    def test_unknown_attributes_are_ignored(self) -> None:
        envelope = StoreResponse.model_validate(
            {
                "data": {
                    "type": "stores",
                    "id": "1",
                    "attributes": {"name": "Fresh Lemons", "brand_new_field": True, "total_revenue": 1500},
                }
            }
        )

        assert envelope.data.attributes.name == "Fresh Lemons"
        assert envelope.data.attributes.total_revenue == 1500

    def test_meta_page_is_camel_case_on_the_wire(self) -> None:
        meta = Meta.model_validate(
            {"page": {"currentPage": 1, "from": 1, "lastPage": 4, "perPage": 10, "to": 10, "total": 31}}
        )

        assert meta.page.last_page == 4
        assert meta.model_dump(by_alias=True)["page"] == {
            "currentPage": 1,
            "from": 1,
            "lastPage": 4,
            "perPage": 10,
            "to": 10,
            "total": 31,
        }

    def test_error_document_needs_errors(self) -> None:
        with pytest.raises(ValidationError):
            APIErrorDocument.model_validate({"data": {}})

        document = APIErrorDocument.model_validate({"errors": [{"status": 500, "code": 12}]})
        assert document.errors[0].status == 500
        assert document.errors[0].title is None


class TestJsonExporter:
    def test_export_uses_wire_names(self, tmp_path: Path, orders_page_body: bytes) -> None:
        envelope = OrderListResponse.model_validate_json(orders_page_body)

        path = export_envelope_json(envelope=envelope, output_path=tmp_path / "out" / "orders.json")

        payload = json.loads(path.read_text(encoding="utf-8"))
        assert payload["meta"]["page"]["currentPage"] == 2
        assert payload["meta"]["page"]["from"] == 6
        assert [item["id"] for item in payload["data"]] == ["1001", "1002"]

    def test_dump_drops_missing_optionals(self) -> None:
        envelope = StoreResponse.model_validate({"data": {"type": "stores", "id": "1", "attributes": {}}})

        dumped = dump_envelope(envelope)

        assert "included" not in dumped
        assert "errors" not in dumped
        assert dumped["data"]["id"] == "1"
