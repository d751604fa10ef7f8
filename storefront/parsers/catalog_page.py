from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..domain.models import CatalogPage, Category, ProductSummary
from ..utils.ids import has_id

logger = logging.getLogger(__name__)

def _as_int(val: Any) -> Optional[int]:
    # bool es subclase de int; no cuenta como metadato numérico
    if isinstance(val, bool):
        return None
    if isinstance(val, int):
        return val
    if isinstance(val, float) and val.is_integer():
        return int(val)
    return None

def extract_rows(payload: Any) -> List[Dict[str, Any]]:
    """
    El backend responde listados en tres formas: array plano, {"items": [...]} o {"data": [...]}.
    Cualquier otra cosa -> lista vacía.
    """
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict):
        # "items": [] es una respuesta válida y vacía; sólo se cae a "data" si falta "items"
        rows = payload.get("items")
        if rows is None:
            rows = payload.get("data")
    else:
        rows = []
    if not isinstance(rows, list):
        return []
    return [r for r in rows if isinstance(r, dict)]

def _page_meta(payload: Any) -> tuple[Optional[int], Optional[int]]:
    if not isinstance(payload, dict):
        return (None, None)
    total_pages = _as_int(payload.get("totalPages")) or _as_int(payload.get("total_pages"))
    total_count = _as_int(payload.get("totalCount"))
    if total_count is None:
        total_count = _as_int(payload.get("total_count"))
    return (total_pages, total_count)

def parse_catalog_page(payload: Any) -> CatalogPage:
    """
    Transforma una respuesta de GET /products en CatalogPage.
    Reglas:
      - Filas sin id utilizable (ausente, null, "") se descartan.
      - Filas que no validan como ProductSummary se descartan con log.
      - totalPages/total_pages/totalCount ausentes -> None (el scanner aplica el fallback).
    """
    items: List[ProductSummary] = []
    for row in extract_rows(payload):
        if not has_id(row.get("id")):
            logger.debug("catalog: skip row without id keys=%s", sorted(row.keys()))
            continue
        try:
            items.append(ProductSummary.model_validate(row))
        except ValidationError as e:
            logger.debug("catalog: skip invalid row id=%r err=%s", row.get("id"), e)

    total_pages, total_count = _page_meta(payload)
    return CatalogPage(items=items, total_count=total_count, total_pages=total_pages)

def parse_categories(payload: Any) -> List[Category]:
    out: List[Category] = []
    for row in extract_rows(payload):
        if not has_id(row.get("id")):
            continue
        try:
            out.append(Category.model_validate(row))
        except ValidationError as e:
            logger.debug("categories: skip invalid row id=%r err=%s", row.get("id"), e)
    return out
