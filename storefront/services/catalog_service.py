from __future__ import annotations
from typing import Any, List
import logging
import httpx

from ..config import settings
from ..http.client import HttpClient
from ..domain.models import Category, CategoryListing, ProductSummary
from ..errors import CatalogUnavailable, CategoryNotFound, ProductNotFound
from ..parsers.catalog_page import parse_catalog_page, parse_categories
from .membership import MembershipResolver
from .scanner import scan_for_members

logger = logging.getLogger(__name__)

# orden del listado público de productos; un valor desconocido conserva el orden del catálogo
SORT_KEYS = {
    "name-asc": (lambda p: (p.name or "").casefold(), False),
    "name-desc": (lambda p: (p.name or "").casefold(), True),
    "price-asc": (lambda p: p.price or 0, False),
    "price-desc": (lambda p: p.price or 0, True),
}

class CatalogService:
    def __init__(
        self,
        http: HttpClient,
        api_prefix: str | None = None,
        page_size: int | None = None,
    ) -> None:
        self.http = http
        self.api_prefix = (settings.API_PREFIX if api_prefix is None else api_prefix).rstrip("/")
        self.page_size = page_size or settings.CATALOG_PAGE_SIZE
        self.membership = MembershipResolver(http, api_prefix=self.api_prefix)

    async def _get_one(self, path: str, not_found: Exception) -> Any:
        try:
            return await self.http.get_json(path)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise not_found from e
            raise CatalogUnavailable(f"GET {path} failed status={e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise CatalogUnavailable(f"GET {path} failed") from e

    # --- colaboradores externos (lectura pública) ---
    async def get_category_by_slug(self, slug: str) -> Category:
        data = await self._get_one(f"{self.api_prefix}/categories/slug/{slug}", CategoryNotFound(slug))
        return Category.model_validate(data)

    async def get_product_by_slug(self, slug: str) -> ProductSummary:
        data = await self._get_one(f"{self.api_prefix}/products/{slug}", ProductNotFound(slug))
        return ProductSummary.model_validate(data)

    async def _get_list(self, path: str, params: dict[str, Any], page: int | None = None) -> Any:
        try:
            return await self.http.get_json(path, params=params)
        except (httpx.HTTPError, ValueError) as e:
            raise CatalogUnavailable(f"GET {path} failed", page=page) from e

    async def list_categories(self, page: int = 1, size: int | None = None) -> List[Category]:
        params = {"page": page, "size": size or settings.CATEGORY_PAGE_SIZE}
        payload = await self._get_list(f"{self.api_prefix}/categories", params, page=page)
        return parse_categories(payload)

    async def list_home_categories(self, take: int = 6) -> List[Category]:
        payload = await self._get_list(f"{self.api_prefix}/categories/home", {"take": take})
        return parse_categories(payload)

    async def fetch_catalog_page(self, page: int) -> Any:
        params = {"page": page, "size": self.page_size}
        return await self.http.get_json(f"{self.api_prefix}/products", params=params)

    # --- reconciliación categoría -> productos ---
    async def products_for_category(self, category: Category) -> List[ProductSummary]:
        member_ids = await self.membership.resolve(category.id)
        if not member_ids:
            logger.info("category: slug=%s id=%s no members", category.slug, category.id)
            return []
        return await scan_for_members(member_ids, self.fetch_catalog_page, page_size=self.page_size)

    async def load_category(self, category_slug: str) -> CategoryListing:
        category = await self.get_category_by_slug(category_slug)
        products = await self.products_for_category(category)
        logger.info("category: slug=%s products=%s", category_slug, len(products))
        return CategoryListing(category=category, products=products)

    async def get_products_for_category(self, category_slug: str) -> List[ProductSummary]:
        listing = await self.load_category(category_slug)
        return listing.products

    # --- listado público de productos (búsqueda + filtro por categoría) ---
    async def list_products(
        self,
        category_id: str | None = None,
        q: str | None = None,
        sort: str = "name-asc",
        page: int = 1,
    ) -> List[ProductSummary]:
        """
        Sin categoría: una página del catálogo. Con categoría: el catálogo recorrido contra
        su conjunto de ids (una categoría sin miembros no muestra nada).
        `q` filtra por nombre o slug sin distinguir mayúsculas.
        """
        if category_id:
            member_ids = await self.membership.resolve(category_id)
            products = await scan_for_members(member_ids, self.fetch_catalog_page, page_size=self.page_size)
        else:
            payload = await self._get_list(
                f"{self.api_prefix}/products", {"page": page, "size": self.page_size}, page=page
            )
            products = parse_catalog_page(payload).items

        if q:
            needle = q.lower()
            products = [
                p for p in products
                if needle in (p.name or "").lower() or needle in (p.slug or "").lower()
            ]

        if sort in SORT_KEYS:
            key, reverse = SORT_KEYS[sort]
            products = sorted(products, key=key, reverse=reverse)

        logger.info("products: category=%s q=%r sort=%s count=%s", category_id, q, sort, len(products))
        return products

