from __future__ import annotations

import logging

from storefront.application.dto.query_spec import QuerySpec
from storefront.application.exceptions import RemoteFetchError
from storefront.application.ports.marketplace import MarketplacePort
from storefront.domain.entities.category import Category
from storefront.domain.entities.item_summary import ItemStatus, ItemSummary

SAMPLE_CATEGORIES = [
    Category(id=1, name="fashion"),
    Category(id=2, name="furniture"),
    Category(id=3, name="bag"),
]

SAMPLE_ITEMS = [
    ItemSummary(id=1, name="leather bag", price=4800, status=ItemStatus.ON_SALE, category_name="bag"),
    ItemSummary(id=2, name="canvas tote bag", price=1200, status=ItemStatus.SOLD_OUT, category_name="bag"),
    ItemSummary(id=3, name="wool jacket", price=8900, status=ItemStatus.ON_SALE, category_name="fashion"),
    ItemSummary(id=4, name="oak chair", price=15000, status=ItemStatus.ON_SALE, category_name="furniture"),
    ItemSummary(id=5, name="draft listing", price=300, status=ItemStatus.INITIAL, category_name="fashion"),
]


class MockMarketplace(MarketplacePort):
    """In-memory marketplace that filters the way the search endpoint does."""

    def __init__(
        self,
        categories: list[Category] | None = None,
        items: list[ItemSummary] | None = None,
    ) -> None:
        self._categories = list(SAMPLE_CATEGORIES if categories is None else categories)
        self._items = list(SAMPLE_ITEMS if items is None else items)
        self._logger = logging.getLogger(__name__)

    async def list_categories(self) -> list[Category]:
        return list(self._categories)

    async def search_items(self, query: QuerySpec) -> list[ItemSummary]:
        name = query.get("name") or ""
        price_min = self._parse_int(query, "price-min", 1)
        price_max = self._parse_int(query, "price-max", 2**63 - 1)
        include_sold_out = (query.get("is-include-soldout") or "false").lower() == "true"

        category_name: str | None = None
        raw_category = query.get("category")
        if raw_category is not None:
            category_id = self._parse_int(query, "category", 0)
            category_name = next(
                (c.name for c in self._categories if c.id == category_id), None
            )
            if category_name is None:
                return []

        allowed = {ItemStatus.ON_SALE}
        if include_sold_out:
            allowed.add(ItemStatus.SOLD_OUT)

        matches = [
            item
            for item in self._items
            if name.lower() in item.name.lower()
            and price_min <= item.price <= price_max
            and item.status in allowed
            and (category_name is None or item.category_name == category_name)
        ]
        self._logger.info("Mock search", extra={"count": len(matches), "keyword": name})
        return matches

    @staticmethod
    def _parse_int(query: QuerySpec, key: str, default: int) -> int:
        raw = query.get(key)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except ValueError as e:
            raise RemoteFetchError(f"invalid {key} type", status_code=500) from e
