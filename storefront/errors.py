from __future__ import annotations


class StorefrontError(Exception):
    """Base de los errores que el servicio deja propagar hacia la capa HTTP/UI."""


class CatalogUnavailable(StorefrontError):
    def __init__(self, message: str = "catalog could not be read", page: int | None = None) -> None:
        super().__init__(message)
        self.page = page


class CategoryNotFound(StorefrontError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"category not found: {slug}")
        self.slug = slug


class ProductNotFound(StorefrontError):
    def __init__(self, slug: str) -> None:
        super().__init__(f"product not found: {slug}")
        self.slug = slug
