from __future__ import annotations

from datetime import datetime

import pytest

from src.models.product import STATUS_PENDING, STATUS_REVIEW_LATER, ProductRecord
from src.services.utils import as_number, format_date, format_price, parse_timestamp


def test_from_dict_keeps_passthrough_fields():
    payload = {
        "id": 11,
        "status": "ReviewLater",
        "fdc_product_id": "FDC-11",
        "name": "Sofa",
        "product_image_uri": "https://img.example/sofa.png",
        "price": 499,
        "quantity": 2,
        "updated_at": "2024-02-10T08:00:00Z",
        "warehouse": "B2",
    }

    record = ProductRecord.from_dict(payload)

    assert record.status == STATUS_REVIEW_LATER
    assert record.extra == {"warehouse": "B2"}
    assert record.to_dict()["warehouse"] == "B2"
    assert record.to_dict()["name"] == "Sofa"


def test_from_dict_defaults_missing_status_to_pending():
    assert ProductRecord.from_dict({"id": 1, "status": None}).status == STATUS_PENDING


@pytest.mark.parametrize("payload", [{}, {"name": "x"}, ["id", 1]])
def test_from_dict_requires_object_with_id(payload):
    with pytest.raises(ValueError):
        ProductRecord.from_dict(payload)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-03-05T12:00:00Z", "03/05/2024"),
        ("2024-12-31T23:59:59.123+00:00", "12/31/2024"),
        ("2023-07-04", "07/04/2023"),
        (datetime(2022, 1, 9, 15, 0), "01/09/2022"),
        (None, ""),
        ("not a date", ""),
    ],
)
def test_format_date(value, expected):
    assert format_date(value) == expected


def test_parse_timestamp_epoch_milliseconds():
    parsed = parse_timestamp(1_700_000_000_000)
    assert parsed == datetime.fromtimestamp(1_700_000_000)


@pytest.mark.parametrize(
    "value, expected",
    [(12, "$12.00"), ("19.5", "$19.50"), (None, "-"), ("call us", "call us")],
)
def test_format_price(value, expected):
    assert format_price(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [("19.99", 19.99), (3, 3.0), ("", None), (None, None), ("n/a", None)],
)
def test_as_number(value, expected):
    assert as_number(value) == expected
