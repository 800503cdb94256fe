"""
Tests for translating a filter into search parameters.
"""

from __future__ import annotations

from storefront.application.use_cases.query_builder import build_query
from storefront.domain.entities.filter_state import ALL_CATEGORIES, FilterState


def test_category_omitted_for_all_categories():
    query = build_query(FilterState())

    assert "category" not in query.keys()
    assert query.get("category") is None
    assert query.keys() == ["name", "price-min", "price-max", "is-include-soldout"]


def test_category_included_for_concrete_category():
    query = build_query(FilterState(category=7))

    assert query.get("category") == "7"


def test_defaults_are_always_sent():
    query = build_query(FilterState())

    assert query.get("name") == ""
    assert query.get("price-min") == "1"
    assert query.get("price-max") == "99999999"
    assert query.get("is-include-soldout") == "false"


def test_full_filter_scenario():
    state = FilterState(
        category=3,
        keyword="bag",
        price_min=100,
        price_max=5000,
        include_sold_out=True,
    )

    query = build_query(state)

    assert dict(query.pairs) == {
        "category": "3",
        "name": "bag",
        "price-min": "100",
        "price-max": "5000",
        "is-include-soldout": "true",
    }
    assert query.to_query_string() == (
        "category=3&name=bag&price-min=100&price-max=5000&is-include-soldout=true"
    )


def test_values_pass_through_verbatim():
    """Inverted ranges and untrimmed keywords are not corrected."""
    state = FilterState(keyword="  Bag ", price_min=5000, price_max=100)

    query = build_query(state)

    assert query.get("name") == "  Bag "
    assert query.get("price-min") == "5000"
    assert query.get("price-max") == "100"


def test_same_filter_builds_equal_queries():
    state = FilterState(category=2, keyword="chair")

    first = build_query(state)
    second = build_query(state)

    assert first == second
    assert first is not second


def test_only_the_sentinel_drops_category():
    for category in (ALL_CATEGORIES, 0, 1, 42):
        query = build_query(FilterState(category=category))
        assert ("category" in query.keys()) is (category != ALL_CATEGORIES)


def test_query_string_renders_unencodable_keyword():
    query = build_query(FilterState(keyword="bag\udcff"))

    assert query.get("name") == "bag\udcff"
    assert query.to_query_string().startswith("name=bag")
