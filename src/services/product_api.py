"""REST client for the product review backend."""
import logging

import requests

from config import BACKEND_BASE_URL, REQUEST_TIMEOUT
from src.models.product import REVIEW_STATUSES, ProductRecord

logger = logging.getLogger(__name__)


class ProductApiError(Exception):
    """Raised when a backend request fails."""


class ProductApiClient:
    """Thin wrapper around the backend's ``/products`` endpoints.

    Requests are not retried; the operator re-triggers the action instead.
    """

    def __init__(
        self,
        base_url: str = BACKEND_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_products(self) -> list[ProductRecord]:
        """Fetch every product record, in backend order.

        Accepts either a bare JSON list or ``{"products": [...]}``.
        """
        data = self._request("GET", "/products")

        if isinstance(data, dict) and isinstance(data.get("products"), list):
            data = data["products"]
        if not isinstance(data, list):
            raise ProductApiError(
                f"Unexpected /products payload: {type(data).__name__}"
            )

        try:
            return [ProductRecord.from_dict(item) for item in data]
        except ValueError as exc:
            raise ProductApiError(f"Malformed product record: {exc}") from exc

    def update_status(self, product_id, status: str) -> None:
        """Set a product's review status."""
        if status not in REVIEW_STATUSES:
            raise ValueError(
                f"Invalid status {status!r}; expected one of {', '.join(REVIEW_STATUSES)}"
            )
        self._request("PUT", f"/products/{product_id}", json={"status": status})
        logger.info("Product %s set to %s", product_id, status)

    def update_product(self, product_id, fields: dict) -> None:
        """Persist edited fields of a product."""
        if not fields:
            raise ValueError("No fields to update")
        self._request("PUT", f"/products/{product_id}", json=dict(fields))
        logger.info("Product %s updated: %s", product_id, ", ".join(sorted(fields)))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, json=None):
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            resp = self._session.request(method, url, json=json, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Backend request %s %s failed: %s", method, url, exc)
            raise ProductApiError(f"{method} {path} failed: {exc}") from exc

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            if method == "GET":
                raise ProductApiError(f"{method} {path} returned invalid JSON") from exc
            # Update endpoints need not return a body
            return None
