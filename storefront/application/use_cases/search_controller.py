from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Callable

from storefront.application.dto.query_spec import QuerySpec
from storefront.application.exceptions import (
    PersistenceWriteError,
    RemoteFetchError,
    StaleResponseDiscarded,
)
from storefront.application.ports.marketplace import MarketplacePort
from storefront.application.ports.search_view import ItemListPort, NotifierPort
from storefront.application.use_cases.category_catalog import CategoryCatalog
from storefront.application.use_cases.filter_store import FilterStore
from storefront.application.use_cases.query_builder import build_query
from storefront.domain.entities.category import Category
from storefront.domain.entities.filter_state import FilterState
from storefront.domain.entities.item_summary import ItemSummary


class SearchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class SearchController:
    """
    Owns the filter for one session and keeps the displayed items in step with it.

    Edits replace the filter and are written through to the FilterStore right
    away; a new query is only issued by submit(). The stored filter can
    therefore be ahead of the items currently shown.

    Every query carries a submission number. A response is applied only if no
    later submission was issued while it was in flight.
    """

    def __init__(
        self,
        filter_store: FilterStore,
        catalog: CategoryCatalog,
        marketplace: MarketplacePort,
        item_list: ItemListPort,
        notifier: NotifierPort,
        query_builder: Callable[[FilterState], QuerySpec] = build_query,
    ) -> None:
        self._filter_store = filter_store
        self._catalog = catalog
        self._marketplace = marketplace
        self._item_list = item_list
        self._notifier = notifier
        self._build_query = query_builder
        self._state = FilterState()
        self._status = SearchStatus.IDLE
        self._items: list[ItemSummary] = []
        self._submission = 0
        self._last_error: str | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def items(self) -> list[ItemSummary]:
        return list(self._items)

    @property
    def categories(self) -> list[Category]:
        return self._catalog.options()

    @property
    def last_error(self) -> str | None:
        return self._last_error

    async def start(self) -> None:
        """Restore the filter, then load categories and run the first search side by side."""
        self._state = self._filter_store.load()
        submission = self._next_submission()
        self._status = SearchStatus.LOADING
        await asyncio.gather(
            self._refresh_categories(),
            self._run_search(submission),
        )

    async def submit(self) -> None:
        submission = self._next_submission()
        self._status = SearchStatus.LOADING
        await self._run_search(submission)

    # Filter edits: persist only, never query.

    def set_category(self, category: int) -> FilterState:
        return self._apply(self._state.with_category(category))

    def set_keyword(self, keyword: str) -> FilterState:
        return self._apply(self._state.with_keyword(keyword))

    def set_price_min(self, price_min: int) -> FilterState:
        return self._apply(self._state.with_price_min(price_min))

    def set_price_max(self, price_max: int) -> FilterState:
        return self._apply(self._state.with_price_max(price_max))

    def set_include_sold_out(self, include_sold_out: bool) -> FilterState:
        return self._apply(self._state.with_include_sold_out(include_sold_out))

    def toggle_include_sold_out(self) -> FilterState:
        return self._apply(self._state.toggle_include_sold_out())

    def _apply(self, state: FilterState) -> FilterState:
        self._state = state
        try:
            self._filter_store.save(state)
        except PersistenceWriteError as e:
            # Next edit rewrites the whole slot.
            self._logger.warning("Filter not persisted", extra={"reason": str(e)})
        return state

    def _next_submission(self) -> int:
        self._submission += 1
        return self._submission

    def _ensure_latest(self, submission: int) -> None:
        if submission != self._submission:
            raise StaleResponseDiscarded(submission=submission, latest=self._submission)

    async def _refresh_categories(self) -> None:
        try:
            await self._catalog.fetch()
        except RemoteFetchError as e:
            self._logger.error("Category fetch failed", extra={"reason": str(e)})
            self._notifier.error(str(e))

    async def _run_search(self, submission: int) -> None:
        query = self._build_query(self._state)
        self._logger.info(
            "Search issued",
            extra={
                "submission": submission,
                "category": self._state.category,
                "keyword": self._state.keyword,
                "query": query.to_query_string(),
            },
        )
        try:
            items = await self._marketplace.search_items(query)
        except RemoteFetchError as e:
            try:
                self._ensure_latest(submission)
            except StaleResponseDiscarded as stale:
                self._logger.debug("Stale search failure dropped", extra={"reason": str(stale)})
                return
            self._status = SearchStatus.FAILED
            self._last_error = str(e)
            self._logger.error(
                "Search failed", extra={"submission": submission, "reason": str(e)}
            )
            self._notifier.error(str(e))
            return

        try:
            self._ensure_latest(submission)
        except StaleResponseDiscarded as stale:
            self._logger.debug("Stale search response dropped", extra={"reason": str(stale)})
            return

        self._items = list(items)
        self._status = SearchStatus.READY
        self._last_error = None
        self._logger.info(
            "Search results applied",
            extra={"submission": submission, "count": len(self._items)},
        )
        self._item_list.set_items(self.items)
