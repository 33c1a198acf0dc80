"""REST client for the inventory backend's product resource."""
import logging
import time
from typing import Optional

import requests
from pydantic import ValidationError

from config import API_BASE_URL, API_PRODUCTS_PATH, API_TIMEOUT
from src.models.product import Product, ProductId

logger = logging.getLogger(__name__)


class InventoryAPIError(Exception):
    """Raised when a request to the inventory API fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LoadError(InventoryAPIError):
    """The product list could not be fetched."""


class SaveError(InventoryAPIError):
    """A create, update or partial update was rejected or never arrived."""


class DeleteError(InventoryAPIError):
    """A delete request failed."""


def parse_product_list(data) -> list[Product]:
    """Normalise a GET /products payload into validated products.

    Accepts a bare list or ``{"products": [...]}``; any other shape is
    treated as empty. Records that fail validation are dropped and logged.
    """
    if isinstance(data, list):
        raw_items = data
    elif isinstance(data, dict) and isinstance(data.get("products"), list):
        raw_items = data["products"]
    else:
        if data is not None:
            logger.warning("Unexpected product list payload type: %s", type(data).__name__)
        return []

    products: list[Product] = []
    for index, item in enumerate(raw_items):
        try:
            products.append(Product.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed product record at index %d: %s",
                index, exc.errors(include_url=False),
            )
    return products


class InventoryAPIClient:
    """Thin wrapper around the backend's ``/api/products`` endpoints."""

    _RETRY_MAX_ATTEMPTS = 3
    _RETRY_DELAYS = [0.5, 1, 2]  # Exponential backoff in seconds
    _RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        products_path: str = API_PRODUCTS_PATH,
        timeout: float = API_TIMEOUT,
        session=None,
    ):
        self.base_url = base_url.rstrip("/")
        self.products_path = "/" + products_path.strip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def products_url(self) -> str:
        return f"{self.base_url}{self.products_path}"

    def product_url(self, product_id: ProductId) -> str:
        return f"{self.products_url}/{product_id}"

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def list_products(self) -> list[Product]:
        """GET the full product collection, retrying transient failures."""
        last_exc = None
        for attempt in range(self._RETRY_MAX_ATTEMPTS):
            try:
                resp = self.session.get(self.products_url, timeout=self.timeout)
                if resp.status_code in self._RETRYABLE_STATUS_CODES:
                    raise requests.HTTPError(f"HTTP {resp.status_code}", response=resp)
                resp.raise_for_status()
                data = resp.json()
                break
            except (requests.ConnectionError, requests.Timeout, requests.HTTPError) as exc:
                last_exc = exc
                status = _status_of(exc)
                retryable = status is None or status in self._RETRYABLE_STATUS_CODES
                if retryable and attempt < self._RETRY_MAX_ATTEMPTS - 1:
                    delay = self._RETRY_DELAYS[attempt]
                    logger.warning(
                        "Product list request failed (attempt %d/%d), retrying in %.1fs: %s",
                        attempt + 1, self._RETRY_MAX_ATTEMPTS, delay, exc,
                    )
                    time.sleep(delay)
                    continue
                raise LoadError(f"Could not load products: {exc}", status) from exc
            except (requests.RequestException, ValueError) as exc:
                # ValueError covers an undecodable JSON body
                raise LoadError(f"Could not load products: {exc}") from exc
        else:
            raise LoadError(f"Could not load products: {last_exc}")

        return parse_product_list(data)

    def create_product(self, payload: dict) -> Optional[dict]:
        """POST a new product; *payload* is sent verbatim."""
        return self._send("post", self.products_url, payload, SaveError)

    def update_product(self, product_id: ProductId, payload: dict) -> Optional[dict]:
        """PUT the full editable field set of an existing product."""
        return self._send("put", self.product_url(product_id), payload, SaveError)

    def patch_product(self, product_id: ProductId, fields: dict) -> Optional[dict]:
        """PATCH a subset of fields, e.g. ``{"quantity": 0}``."""
        return self._send("patch", self.product_url(product_id), fields, SaveError)

    def delete_product(self, product_id: ProductId) -> None:
        self._send("delete", self.product_url(product_id), None, DeleteError)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _send(self, method: str, url: str, payload, error_cls):
        """Issue a single, non-retried mutating request."""
        kwargs = {"timeout": self.timeout}
        if payload is not None:
            kwargs["json"] = payload
        try:
            resp = getattr(self.session, method)(url, **kwargs)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise error_cls(
                f"{method.upper()} {url} failed: {exc}", _status_of(exc),
            ) from exc

        logger.info("%s %s -> %s", method.upper(), url, resp.status_code)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return None


def _status_of(exc: Exception) -> Optional[int]:
    response = getattr(exc, "response", None)
    return getattr(response, "status_code", None)
