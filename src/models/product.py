"""Product record as returned by the backend."""
from dataclasses import dataclass, field
from typing import Any

STATUS_PENDING = "Pending"
STATUS_APPROVED = "Approved"
STATUS_REJECTED = "Rejected"
STATUS_REVIEW_LATER = "ReviewLater"

# Statuses an operator can set from the review queue
REVIEW_STATUSES = (STATUS_APPROVED, STATUS_REJECTED, STATUS_REVIEW_LATER)

# Descriptive fields the operator may edit and save back
EDITABLE_FIELDS = (
    "name",
    "product_description",
    "product_dimensions",
    "price",
    "quantity",
)

# Editable fields the UI edits as numbers
NUMERIC_FIELDS = ("price", "quantity")

_KNOWN_FIELDS = (
    "id",
    "status",
    "fdc_product_id",
    "name",
    "product_image_uri",
    "product_description",
    "product_dimensions",
    "price",
    "quantity",
    "created_at",
    "updated_at",
)


@dataclass
class ProductRecord:
    id: Any
    status: str = STATUS_PENDING
    fdc_product_id: Any = None
    name: str | None = None
    product_image_uri: str | None = None
    product_description: str | None = None
    product_dimensions: str | None = None
    price: Any = None
    quantity: Any = None
    created_at: str | None = None
    updated_at: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: dict) -> "ProductRecord":
        """Build a record from a backend JSON object.

        Unknown keys are kept in ``extra`` so they survive ``to_dict()``.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Product payload must be an object, got {type(payload).__name__}")
        if payload.get("id") is None:
            raise ValueError("Product payload has no 'id'")

        known = {k: payload[k] for k in _KNOWN_FIELDS if k in payload}
        if known.get("status") is None:
            known["status"] = STATUS_PENDING
        extra = {k: v for k, v in payload.items() if k not in _KNOWN_FIELDS}
        return cls(**known, extra=extra)

    def to_dict(self) -> dict:
        data = {k: getattr(self, k) for k in _KNOWN_FIELDS}
        data.update(self.extra)
        return data

    def __repr__(self) -> str:
        return f"<ProductRecord id={self.id!r} status={self.status!r}>"
