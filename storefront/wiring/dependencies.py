from functools import lru_cache
import logging

from storefront.core.config import settings
from storefront.application.ports.marketplace import MarketplacePort
from storefront.application.ports.search_view import ItemListPort, NotifierPort
from storefront.application.ports.slot_store import SlotStorePort
from storefront.application.use_cases.category_catalog import CategoryCatalog
from storefront.application.use_cases.filter_store import FilterStore
from storefront.application.use_cases.search_controller import SearchController
from storefront.infrastructure.marketplace.http_client import MarketplaceHttpClient
from storefront.infrastructure.marketplace.mock_marketplace import MockMarketplace
from storefront.infrastructure.store.json_store import JsonSlotStore
from storefront.infrastructure.store.memory_store import MemorySlotStore


@lru_cache
def get_slot_store() -> SlotStorePort:
    if settings.STORE_PROVIDER.lower() == "memory":
        return MemorySlotStore()
    return JsonSlotStore(data_dir=settings.DATA_DIR)


@lru_cache
def get_marketplace() -> MarketplacePort:
    logger = logging.getLogger(__name__)
    logger.info("ENV=%s", settings.ENV)

    if not settings.API_BASE_URL:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockMarketplace (API_BASE_URL missing, ENV=dev/local)")
            return MockMarketplace()
        raise ValueError("API_BASE_URL is required to reach the marketplace.")

    logger.info("Using MarketplaceHttpClient base_url=%s", settings.API_BASE_URL)
    return MarketplaceHttpClient(
        base_url=settings.API_BASE_URL,
        token=settings.API_TOKEN,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
    )


def get_filter_store() -> FilterStore:
    return FilterStore(slots=get_slot_store(), key=settings.FILTER_SLOT_KEY)


def get_search_controller(item_list: ItemListPort, notifier: NotifierPort) -> SearchController:
    marketplace = get_marketplace()
    return SearchController(
        filter_store=get_filter_store(),
        catalog=CategoryCatalog(marketplace=marketplace),
        marketplace=marketplace,
        item_list=item_list,
        notifier=notifier,
    )
