from __future__ import annotations
from typing import Any, Optional
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)

Identifier = int | str


class Category(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Identifier
    name: Optional[str] = None
    slug: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("imageUrl", "image_url"))


class ProductSummary(BaseModel):
    # snapshot inmutable del catálogo; el cliente nunca lo modifica
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: Identifier
    slug: Optional[str] = None
    name: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    short_desc: Optional[str] = Field(default=None, validation_alias=AliasChoices("shortDesc", "short_desc"))
    image_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("imageUrl", "mainImageUrl", "image_url")
    )

    @field_validator("id", mode="before")
    @classmethod
    def _scalar_id(cls, value: Any) -> Any:
        # 10.0 -> 10; 10.5 -> "10.5" (mismo texto que produce normalize_id)
        if isinstance(value, float):
            return int(value) if value.is_integer() else str(value)
        return value

    @field_validator("slug", "name", "price", "currency", "short_desc", "image_url", mode="wrap")
    @classmethod
    def _lenient(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        # sólo el id decide si la fila cuenta; un campo descriptivo inválido queda en None
        try:
            return handler(value)
        except ValidationError:
            return None


class CatalogPage(BaseModel):
    items: list[ProductSummary] = Field(default_factory=list)
    total_count: Optional[int] = None
    total_pages: Optional[int] = None


class CategoryListing(BaseModel):
    category: Category
    products: list[ProductSummary] = Field(default_factory=list)
