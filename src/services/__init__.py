"""Services package."""
from src.services.product_api import ProductApiClient, ProductApiError
from src.services.review_queue import (
    VIEW_ALL,
    VIEW_APPROVED,
    VIEW_REJECTED,
    VIEW_REVIEW_LATER,
    VIEWS,
    ReviewQueueController,
    derive_views,
)
from src.services.utils import format_date, format_price, parse_timestamp

__all__ = [
    "ProductApiClient",
    "ProductApiError",
    "ReviewQueueController",
    "derive_views",
    "VIEWS",
    "VIEW_ALL",
    "VIEW_APPROVED",
    "VIEW_REJECTED",
    "VIEW_REVIEW_LATER",
    "format_date",
    "format_price",
    "parse_timestamp",
]
