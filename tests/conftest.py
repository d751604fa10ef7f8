"""Shared fixtures: a fake storefront backend served through httpx.MockTransport."""

import httpx
import pytest
import pytest_asyncio

from storefront.http.client import HttpClient
from storefront.services.catalog_service import CatalogService


def product(pid, **extra):
    """Build a catalog row the way the backend returns it."""
    row = {"id": pid, "slug": f"p-{pid}", "name": f"Product {pid}", "price": 10.0, "currency": "GEL"}
    row.update(extra)
    return row


class FakeBackend:
    """Routes requests to canned JSON and records every path hit."""

    def __init__(self):
        self.categories = {}
        self.memberships = {}
        self.catalog_pages = {}
        self.products = {}
        self.failing_pages = set()
        self.membership_status = None
        self.requests = []

    def catalog_requests(self):
        return [int(r.url.params["page"]) for r in self.requests if r.url.path == "/api/products"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/api/products":
            page = int(request.url.params["page"])
            if page in self.failing_pages:
                raise httpx.ConnectError("connection refused", request=request)
            if page not in self.catalog_pages:
                return httpx.Response(404, json={"error": "no such page"})
            return httpx.Response(200, json=self.catalog_pages[page])

        if path.startswith("/api/categories/slug/"):
            slug = path.rsplit("/", 1)[-1]
            if slug not in self.categories:
                return httpx.Response(404, json={"error": "Category not found"})
            return httpx.Response(200, json=self.categories[slug])

        if path.startswith("/api/categories/") and path.endswith("/products"):
            if self.membership_status is not None:
                return httpx.Response(self.membership_status)
            category_id = path.split("/")[3]
            if category_id not in self.memberships:
                return httpx.Response(404)
            return httpx.Response(200, json=self.memberships[category_id])

        if path == "/api/categories/home":
            take = int(request.url.params["take"])
            return httpx.Response(200, json=list(self.categories.values())[:take])

        if path == "/api/categories":
            return httpx.Response(200, json={"items": list(self.categories.values())})

        if path.startswith("/api/products/"):
            slug = path.rsplit("/", 1)[-1]
            if slug not in self.products:
                return httpx.Response(404)
            return httpx.Response(200, json=self.products[slug])

        return httpx.Response(404)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def http_client(backend):
    return HttpClient(base_url="http://backend.test", transport=httpx.MockTransport(backend.handler))


@pytest_asyncio.fixture
async def service(http_client):
    async with http_client.lifespan():
        yield CatalogService(http=http_client, api_prefix="/api", page_size=100)
