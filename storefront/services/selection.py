from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging

from ..domain.models import Category, ProductSummary
from ..errors import StorefrontError
from .catalog_service import CatalogService

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ScanCycle:
    generation: int
    category_slug: str

class CategorySelection:
    """
    Estado de una visita a la página de categoría.
    Cada selección abre un ciclo con un token de generación creciente; el resultado
    de un ciclo sólo se aplica si sigue siendo el último, así una búsqueda lenta
    de una categoría anterior no pisa la actual.
    """
    def __init__(self, service: CatalogService) -> None:
        self.service = service
        self.generation = 0
        self.category_slug: Optional[str] = None
        self.category: Optional[Category] = None
        self.products: List[ProductSummary] = []
        self.error: Optional[str] = None
        self.loading = False

    def begin(self, category_slug: str) -> ScanCycle:
        self.generation += 1
        self.category_slug = category_slug
        self.loading = True
        self.error = None
        return ScanCycle(generation=self.generation, category_slug=category_slug)

    def is_current(self, cycle: ScanCycle) -> bool:
        return cycle.generation == self.generation

    async def select(self, category_slug: str) -> bool:
        cycle = self.begin(category_slug)
        try:
            listing = await self.service.load_category(category_slug)
        except StorefrontError as e:
            if not self.is_current(cycle):
                logger.debug("selection: drop stale error gen=%s slug=%s", cycle.generation, category_slug)
                return False
            logger.warning("selection: slug=%s failed err=%s", category_slug, e)
            self.category = None
            self.products = []
            self.error = str(e)
            self.loading = False
            return True

        if not self.is_current(cycle):
            logger.debug("selection: drop stale result gen=%s current=%s slug=%s",
                         cycle.generation, self.generation, category_slug)
            return False

        self.category = listing.category
        self.products = listing.products
        self.loading = False
        return True
