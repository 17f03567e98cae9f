from __future__ import annotations

import pytest
import requests

from src.models.product import STATUS_APPROVED, STATUS_PENDING, STATUS_REJECTED
from src.services.product_api import ProductApiClient, ProductApiError
from tests.fakes import FakeSession, make_response

BASE = "http://backend.test:3001"


def _client(*responses, base_url=BASE + "/"):
    session = FakeSession(*responses)
    return ProductApiClient(base_url=base_url, timeout=5, session=session), session


def test_list_products_parses_records_in_order():
    client, session = _client(make_response(200, [
        {"id": 2, "status": "Approved", "name": "Lamp", "price": "19.99"},
        {"id": 1, "name": "Desk", "color": "oak"},
    ]))

    products = client.list_products()

    assert [p.id for p in products] == [2, 1]
    assert products[0].status == STATUS_APPROVED
    assert products[1].status == STATUS_PENDING
    assert products[1].extra == {"color": "oak"}
    assert session.requests == [
        {"method": "GET", "url": f"{BASE}/products", "json": None, "timeout": 5},
    ]


def test_list_products_accepts_wrapped_payload():
    client, _ = _client(make_response(200, {"products": [{"id": 9}]}))

    assert [p.id for p in client.list_products()] == [9]


@pytest.mark.parametrize("payload", [{"items": []}, "oops", 42])
def test_list_products_rejects_unexpected_payload(payload):
    client, _ = _client(make_response(200, payload))

    with pytest.raises(ProductApiError):
        client.list_products()


def test_list_products_rejects_record_without_id():
    client, _ = _client(make_response(200, [{"name": "no id"}]))

    with pytest.raises(ProductApiError, match="Malformed"):
        client.list_products()


def test_list_products_invalid_json():
    client, _ = _client(make_response(200, raw=b"<html>not json</html>"))

    with pytest.raises(ProductApiError, match="invalid JSON"):
        client.list_products()


def test_http_error_is_wrapped():
    client, _ = _client(make_response(503, {"error": "down"}))

    with pytest.raises(ProductApiError) as excinfo:
        client.list_products()
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_transport_error_is_wrapped():
    client, _ = _client(requests.ConnectionError("connection refused"))

    with pytest.raises(ProductApiError, match="connection refused"):
        client.list_products()


def test_update_status_puts_status_body():
    client, session = _client(make_response(200))

    client.update_status(42, STATUS_REJECTED)

    assert session.requests == [{
        "method": "PUT",
        "url": f"{BASE}/products/42",
        "json": {"status": STATUS_REJECTED},
        "timeout": 5,
    }]


def test_update_status_tolerates_non_json_body():
    client, _ = _client(make_response(200, raw=b"OK"))

    client.update_status(1, STATUS_APPROVED)


def test_update_status_validates_before_sending():
    client, session = _client()

    with pytest.raises(ValueError):
        client.update_status(1, STATUS_PENDING)
    assert session.requests == []


def test_update_status_failure():
    client, _ = _client(make_response(404, {"error": "not_found"}))

    with pytest.raises(ProductApiError, match="PUT /products/7"):
        client.update_status(7, STATUS_APPROVED)


def test_update_product_sends_fields():
    client, session = _client(make_response(204))

    client.update_product(3, {"name": "Oak Chair", "price": 12.5})

    assert session.requests[0]["method"] == "PUT"
    assert session.requests[0]["json"] == {"name": "Oak Chair", "price": 12.5}


def test_update_product_requires_fields():
    client, session = _client()

    with pytest.raises(ValueError):
        client.update_product(3, {})
    assert session.requests == []
