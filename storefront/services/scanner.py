from __future__ import annotations
import logging
import math
from typing import Any, Awaitable, Callable, Collection, List

import httpx

from ..config import settings
from ..domain.models import CatalogPage, ProductSummary
from ..errors import CatalogUnavailable
from ..parsers.catalog_page import parse_catalog_page
from ..utils.ids import normalize_id

logger = logging.getLogger(__name__)

FetchPage = Callable[[int], Awaitable[Any]]

def total_pages_for(page: CatalogPage, page_size: int) -> int:
    """
    totalPages del backend si viene; si no, ceil(totalCount / page_size) con
    totalCount = nº de filas de la propia página cuando falta.
    Ese fallback puede cortar antes de tiempo con metadatos incompletos (aceptado:
    evita bucles infinitos contra un backend inconsistente).
    """
    if page.total_pages:
        return page.total_pages
    count = page.total_count if page.total_count is not None else len(page.items)
    return max(1, math.ceil((count or page_size) / page_size))

async def scan_for_members(
    membership: Collection[str],
    fetch_page: FetchPage,
    page_size: int | None = None,
) -> List[ProductSummary]:
    """
    Recorre el catálogo página a página (1, 2, ...) acumulando los productos cuyo id
    normalizado está en `membership`, en orden de catálogo.
    Para cuando se pasa de la última página o cuando ya hay tantas coincidencias como ids.
    Un fallo al leer una página aborta con CatalogUnavailable.
    """
    if not membership:
        return []

    size = page_size or settings.CATALOG_PAGE_SIZE
    expected = len(membership)
    matched: List[ProductSummary] = []
    page_no = 1

    while True:
        try:
            payload = await fetch_page(page_no)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("scan: page=%s failed err=%r", page_no, e)
            raise CatalogUnavailable(f"catalog page {page_no} could not be read", page=page_no) from e

        page = parse_catalog_page(payload)
        # sin deduplicar: si el backend repite un id, mejor contar de más que perderlo
        matched.extend(p for p in page.items if normalize_id(p.id) in membership)

        total_pages = total_pages_for(page, size)
        logger.debug("scan: page=%s rows=%s matched=%s/%s total_pages=%s",
                     page_no, len(page.items), len(matched), expected, total_pages)

        page_no += 1
        if page_no > total_pages or len(matched) >= expected:
            break

    logger.info("scan: done pages=%s matched=%s expected=%s", page_no - 1, len(matched), expected)
    return matched
