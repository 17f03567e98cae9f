"""Data models package."""
from src.models.product import (
    EDITABLE_FIELDS,
    NUMERIC_FIELDS,
    REVIEW_STATUSES,
    STATUS_APPROVED,
    STATUS_PENDING,
    STATUS_REJECTED,
    STATUS_REVIEW_LATER,
    ProductRecord,
)

__all__ = [
    "ProductRecord",
    "STATUS_PENDING",
    "STATUS_APPROVED",
    "STATUS_REJECTED",
    "STATUS_REVIEW_LATER",
    "REVIEW_STATUSES",
    "EDITABLE_FIELDS",
    "NUMERIC_FIELDS",
]
