from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from storefront.domain.entities.filter_state import (
    ALL_CATEGORIES,
    DEFAULT_PRICE_MAX,
    DEFAULT_PRICE_MIN,
    FilterState,
)


class PersistedFilterDTO(BaseModel):
    """JSON shape of the `searchkeys` slot."""

    model_config = ConfigDict(extra="ignore")

    category: int = ALL_CATEGORIES
    keyword: str = ""
    price_min: int = DEFAULT_PRICE_MIN
    price_max: int = DEFAULT_PRICE_MAX
    is_include_soldout: bool = False

    @classmethod
    def from_state(cls, state: FilterState) -> PersistedFilterDTO:
        return cls(
            category=state.category,
            keyword=state.keyword,
            price_min=state.price_min,
            price_max=state.price_max,
            is_include_soldout=state.include_sold_out,
        )

    def to_state(self) -> FilterState:
        return FilterState(
            category=self.category,
            keyword=self.keyword,
            price_min=self.price_min,
            price_max=self.price_max,
            include_sold_out=self.is_include_soldout,
        )
