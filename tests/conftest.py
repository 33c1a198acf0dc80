"""Shared fakes for the inventory API."""
import json
import threading

import pytest
import requests

from src.models.product import Product
from src.services.api_client import DeleteError, SaveError


class FakeResponse:
    def __init__(self, status_code=200, payload=None, body=None):
        self.status_code = status_code
        if body is not None:
            self.content = body
        elif payload is not None:
            self.content = json.dumps(payload).encode()
        else:
            self.content = b""

    def json(self):
        return json.loads(self.content.decode())

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}", response=self)


class FakeSession:
    """Stands in for ``requests.Session``; replies from a per-route queue."""

    def __init__(self):
        self.calls = []
        self._routes = {}

    def reply(self, method, url, *outcomes):
        self._routes.setdefault((method, url), []).extend(outcomes)

    def _handle(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        queue = self._routes.get((method, url))
        if not queue:
            return FakeResponse(200, body=b"")
        outcome = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def get(self, url, **kwargs):
        return self._handle("get", url, **kwargs)

    def post(self, url, **kwargs):
        return self._handle("post", url, **kwargs)

    def put(self, url, **kwargs):
        return self._handle("put", url, **kwargs)

    def patch(self, url, **kwargs):
        return self._handle("patch", url, **kwargs)

    def delete(self, url, **kwargs):
        return self._handle("delete", url, **kwargs)


class FakeInventoryClient:
    """In-memory backend with the same surface as ``InventoryAPIClient``."""

    def __init__(self, products=None):
        self.store = {p["id"]: dict(p) for p in (products or [])}
        self.calls = []
        self.fail_ids = set()
        self.fail_saves = False
        self.fail_names = set()
        self._next_id = max(self.store, default=0) + 1
        self._lock = threading.Lock()

    def list_products(self):
        with self._lock:
            self.calls.append(("list",))
            return [Product.model_validate(p) for p in self.store.values()]

    def create_product(self, payload):
        with self._lock:
            self.calls.append(("create", dict(payload)))
            if self.fail_saves or payload.get("name") in self.fail_names:
                raise SaveError("HTTP 400", 400)
            new = {
                "id": self._next_id,
                "name": payload["name"],
                "description": payload.get("description", ""),
                "quantity": int(payload["quantity"]),
            }
            self.store[new["id"]] = new
            self._next_id += 1
            return new

    def update_product(self, product_id, payload):
        with self._lock:
            self.calls.append(("update", product_id, dict(payload)))
            if self.fail_saves:
                raise SaveError("HTTP 500", 500)
            self.store[product_id].update(payload)
            return self.store[product_id]

    def patch_product(self, product_id, fields):
        with self._lock:
            self.calls.append(("patch", product_id, dict(fields)))
            if product_id in self.fail_ids:
                raise SaveError("HTTP 500", 500)
            self.store[product_id].update(fields)
            return self.store[product_id]

    def delete_product(self, product_id):
        with self._lock:
            self.calls.append(("delete", product_id))
            if product_id in self.fail_ids:
                raise DeleteError("HTTP 500", 500)
            self.store.pop(product_id, None)

    def calls_of(self, kind):
        return [c for c in self.calls if c[0] == kind]


def make_products(count, quantity=5, prefix="Item"):
    return [
        {"id": i, "name": f"{prefix} {i}", "description": "", "quantity": quantity}
        for i in range(1, count + 1)
    ]


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def no_sleep(monkeypatch):
    monkeypatch.setattr("src.services.api_client.time.sleep", lambda _s: None)
