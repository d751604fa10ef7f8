"""Tests for catalog page parsing across the backend's response shapes."""

import pytest
from pydantic import ValidationError

from conftest import product
from storefront.parsers.catalog_page import extract_rows, parse_catalog_page, parse_categories


ROWS = [product(1), product("A-2")]


@pytest.mark.parametrize(
    "payload",
    [ROWS, {"items": ROWS}, {"data": ROWS}],
    ids=["bare-array", "items", "data"],
)
def test_shapes_yield_same_items(payload):
    page = parse_catalog_page(payload)
    assert [p.id for p in page.items] == [1, "A-2"]


def test_metadata_camel_case():
    page = parse_catalog_page({"items": ROWS, "totalPages": 3, "totalCount": 250})
    assert page.total_pages == 3
    assert page.total_count == 250


def test_metadata_snake_case():
    page = parse_catalog_page({"data": ROWS, "total_pages": 4, "total_count": 301})
    assert page.total_pages == 4
    assert page.total_count == 301


def test_bare_array_has_no_metadata():
    page = parse_catalog_page(ROWS)
    assert page.total_pages is None
    assert page.total_count is None


def test_non_numeric_metadata_ignored():
    page = parse_catalog_page({"items": ROWS, "totalPages": "3", "totalCount": True})
    assert page.total_pages is None
    assert page.total_count is None


def test_rows_without_id_are_skipped():
    page = parse_catalog_page([{"name": "no id"}, {"id": None}, {"id": ""}, "junk", product(7)])
    assert [p.id for p in page.items] == [7]


def test_unexpected_payload_is_empty():
    assert parse_catalog_page(None).items == []
    assert parse_catalog_page("oops").items == []
    assert extract_rows({"items": "not a list"}) == []


def test_wire_aliases():
    page = parse_catalog_page([product(5, shortDesc="short", mainImageUrl="http://img/5.png")])
    item = page.items[0]
    assert item.short_desc == "short"
    assert item.image_url == "http://img/5.png"


def test_product_summary_is_frozen():
    item = parse_catalog_page([product(1)]).items[0]
    with pytest.raises(ValidationError):
        item.name = "changed"


def test_parse_categories():
    cats = parse_categories({"items": [{"id": "c1", "name": "Shoes", "slug": "shoes"}, {"name": "orphan"}]})
    assert [c.slug for c in cats] == ["shoes"]


def test_empty_items_does_not_fall_through_to_data():
    page = parse_catalog_page({"items": [], "data": [product(1)]})
    assert page.items == []


def test_null_items_falls_through_to_data():
    page = parse_catalog_page({"items": None, "data": [product(1)]})
    assert [p.id for p in page.items] == [1]


def test_invalid_optional_fields_become_none():
    page = parse_catalog_page([product(1, name=["x"], price="n/a", currency={"code": "GEL"}, shortDesc=3)])
    item = page.items[0]
    assert item.id == 1
    assert item.name is None
    assert item.price is None
    assert item.currency is None
    assert item.short_desc is None
    assert item.slug == "p-1"


def test_float_ids_are_coerced():
    page = parse_catalog_page([product(10.0), product(2.5)])
    assert [p.id for p in page.items] == [10, "2.5"]
