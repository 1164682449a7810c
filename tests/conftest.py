"""Configuración del pytest para el cliente Lemon Squeezy."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

# Añade src/ al PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from adapters.lemonsqueezy_client import LemonSqueezyClient  # noqa: E402
from core.config import AppSettings  # noqa: E402

TEST_HOST = "api.lemonsqueezy.test"
TEST_API_KEY = "sk_test_123"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LEMONSQUEEZY_API_KEY", "LEMONSQUEEZY_API_HOST", "LEMONSQUEEZY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api_host=TEST_HOST)


def resource(resource_type: str, resource_id: str, **attributes: Any) -> dict[str, Any]:
    return {
        "type": resource_type,
        "id": resource_id,
        "attributes": attributes,
        "relationships": {},
        "links": {"self": f"https://{TEST_HOST}/v1/{resource_type}/{resource_id}"},
    }


def page_meta(current: int, last: int, per_page: int, total: int) -> dict[str, Any]:
    first = (current - 1) * per_page + 1
    return {
        "page": {
            "currentPage": current,
            "from": first,
            "lastPage": last,
            "perPage": per_page,
            "to": min(first + per_page - 1, total),
            "total": total,
        }
    }


@pytest.fixture
def order_item_body() -> bytes:
    return json.dumps(
        {
            "jsonapi": {"version": "1.0"},
            "links": {"self": f"https://{TEST_HOST}/v1/order-items/42"},
            "data": resource(
                "order-items",
                "42",
                order_id=7,
                product_id=3,
                variant_id=9,
                product_name="Lemonade",
                variant_name="Default",
                price=1999,
                created_at="2023-01-11T10:00:00.000000Z",
                updated_at="2023-01-11T10:00:00.000000Z",
                test_mode=True,
            ),
        }
    ).encode()


@pytest.fixture
def orders_page_body() -> bytes:
    return json.dumps(
        {
            "meta": page_meta(current=2, last=3, per_page=5, total=12),
            "links": {
                "first": f"https://{TEST_HOST}/v1/orders?page[number]=1&page[size]=5",
                "last": f"https://{TEST_HOST}/v1/orders?page[number]=3&page[size]=5",
            },
            "data": [
                resource("orders", "1001", order_number=1, user_email="a@example.com", status="paid", total=999),
                resource("orders", "1002", order_number=2, user_email="b@example.com", status="refunded", total=0),
            ],
            "included": [
                resource("stores", "1", name="Fresh Lemons"),
            ],
        }
    ).encode()


@pytest.fixture
def not_found_body() -> bytes:
    return json.dumps(
        {
            "jsonapi": {"version": "1.0"},
            "errors": [
                {
                    "detail": "The related resource does not exist.",
                    "status": "404",
                    "title": "Not Found",
                }
            ],
        }
    ).encode()


@pytest.fixture
def make_client(settings: AppSettings) -> Callable[[Handler], LemonSqueezyClient]:
    """Cliente real sobre `httpx.MockTransport`."""

    def _make(handler: Handler) -> LemonSqueezyClient:
        transport = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return LemonSqueezyClient(api_key=TEST_API_KEY, settings=settings, transport=transport)

    return _make
