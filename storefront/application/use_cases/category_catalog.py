from __future__ import annotations

import logging

from storefront.application.exceptions import RemoteFetchError
from storefront.application.ports.marketplace import MarketplacePort
from storefront.domain.entities.category import ALL_CATEGORIES_OPTION, Category


class CategoryCatalog:
    """Selectable categories for the current session."""

    def __init__(self, marketplace: MarketplacePort) -> None:
        self._marketplace = marketplace
        self._categories: list[Category] = []
        self._logger = logging.getLogger(__name__)

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    async def fetch(self) -> list[Category]:
        """
        Fetch categories from the marketplace.

        On failure the cached list is emptied and the RemoteFetchError is
        re-raised so the caller can surface it; options() then offers only "All".
        """
        try:
            categories = await self._marketplace.list_categories()
        except RemoteFetchError:
            self._categories = []
            raise
        self._categories = list(categories)
        self._logger.info("Categories loaded", extra={"count": len(self._categories)})
        return self.categories

    def options(self) -> list[Category]:
        """The synthesized "All" option followed by the fetched categories in server order."""
        return [ALL_CATEGORIES_OPTION, *self._categories]

