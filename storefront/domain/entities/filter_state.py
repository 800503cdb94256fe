from __future__ import annotations

from dataclasses import dataclass, replace

ALL_CATEGORIES = -1
DEFAULT_PRICE_MIN = 1
DEFAULT_PRICE_MAX = 99_999_999


@dataclass(frozen=True)
class FilterState:
    """Current search criteria.

    Values are not validated: an inverted price range or a negative bound is
    kept as typed and only shows up in the outgoing query.
    """

    category: int = ALL_CATEGORIES  # ALL_CATEGORIES or a concrete category id
    keyword: str = ""  # empty means no keyword constraint
    price_min: int = DEFAULT_PRICE_MIN
    price_max: int = DEFAULT_PRICE_MAX
    include_sold_out: bool = False

    @property
    def is_all_categories(self) -> bool:
        return self.category == ALL_CATEGORIES

    def with_category(self, category: int) -> FilterState:
        return replace(self, category=category)

    def with_keyword(self, keyword: str) -> FilterState:
        return replace(self, keyword=keyword)

    def with_price_min(self, price_min: int) -> FilterState:
        return replace(self, price_min=price_min)

    def with_price_max(self, price_max: int) -> FilterState:
        return replace(self, price_max=price_max)

    def with_include_sold_out(self, include_sold_out: bool) -> FilterState:
        return replace(self, include_sold_out=include_sold_out)

    def toggle_include_sold_out(self) -> FilterState:
        return replace(self, include_sold_out=not self.include_sold_out)
