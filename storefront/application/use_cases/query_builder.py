from __future__ import annotations

from storefront.application.dto.query_spec import QuerySpec
from storefront.domain.entities.filter_state import FilterState


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def build_query(state: FilterState) -> QuerySpec:
    """
    Translate a filter into search parameters.

    Values are passed through verbatim. `category` is omitted entirely for the
    "all categories" selector; the server reads a missing key as "any category".
    """
    pairs: list[tuple[str, str]] = []
    if not state.is_all_categories:
        pairs.append(("category", str(state.category)))
    pairs.extend(
        [
            ("name", state.keyword),
            ("price-min", str(state.price_min)),
            ("price-max", str(state.price_max)),
            ("is-include-soldout", _bool_text(state.include_sold_out)),
        ]
    )
    return QuerySpec(pairs=tuple(pairs))
