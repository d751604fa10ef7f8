from __future__ import annotations
from typing import Optional
from fastapi import APIRouter, HTTPException, Depends, Query
from ..errors import CatalogUnavailable, CategoryNotFound, ProductNotFound
from ..services.catalog_service import CatalogService

router = APIRouter()
service: CatalogService | None = None

def init_routes(catalog_service: CatalogService) -> APIRouter:
    global service
    service = catalog_service
    return router

def get_service() -> CatalogService:
    if service is None:
        raise HTTPException(500, "Service not initialized")
    return service

@router.get("/health")
async def health():
    return {"ok": True}

@router.get("/categories")
async def categories(
    page: int = Query(1, ge=1),
    size: int = Query(20, ge=1, le=100),
    service: CatalogService = Depends(get_service),
):
    try:
        cats = await service.list_categories(page=page, size=size)
    except CatalogUnavailable:
        raise HTTPException(502, "Categories could not be loaded")
    return [c.model_dump(mode="json") for c in cats]

@router.get("/categories/home")
async def home_categories(take: int = Query(6, ge=1, le=50), service: CatalogService = Depends(get_service)):
    try:
        cats = await service.list_home_categories(take=take)
    except CatalogUnavailable:
        raise HTTPException(502, "Categories could not be loaded")
    return [c.model_dump(mode="json") for c in cats]

@router.get("/categories/{slug}/products")
async def category_products(slug: str, service: CatalogService = Depends(get_service)):
    try:
        listing = await service.load_category(slug)
    except CategoryNotFound:
        raise HTTPException(404, "Category not found")
    except CatalogUnavailable:
        raise HTTPException(502, "Catalog could not be loaded")
    return listing.model_dump(mode="json")

@router.get("/products")
async def products(
    category_id: Optional[str] = None,
    q: Optional[str] = None,
    sort: str = "name-asc",
    page: int = Query(1, ge=1),
    service: CatalogService = Depends(get_service),
):
    try:
        items = await service.list_products(category_id=category_id, q=q, sort=sort, page=page)
    except CatalogUnavailable:
        raise HTTPException(502, "Catalog could not be loaded")
    return [p.model_dump(mode="json") for p in items]

@router.get("/products/{slug}")
async def product_detail(slug: str, service: CatalogService = Depends(get_service)):
    try:
        product = await service.get_product_by_slug(slug)
    except ProductNotFound:
        raise HTTPException(404, "Product not found")
    except CatalogUnavailable:
        raise HTTPException(502, "Catalog could not be loaded")
    return product.model_dump(mode="json")
