from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.application.dto.query_spec import QuerySpec
from storefront.domain.entities.category import Category
from storefront.domain.entities.item_summary import ItemSummary


class MarketplacePort(ABC):
    @abstractmethod
    async def list_categories(self) -> list[Category]:
        """GET /items/categories. Raises RemoteFetchError on failure."""
        raise NotImplementedError

    @abstractmethod
    async def search_items(self, query: QuerySpec) -> list[ItemSummary]:
        """
        GET /search-detail with the query's parameters.

        Returns an empty list when nothing matches.
        Raises RemoteFetchError on failure.
        """
        raise NotImplementedError
