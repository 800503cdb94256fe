from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from storefront.application.dto.query_spec import SEARCH_PATH, QuerySpec
from storefront.application.exceptions import RemoteFetchError
from storefront.application.ports.marketplace import MarketplacePort
from storefront.domain.entities.category import Category
from storefront.domain.entities.item_summary import ItemSummary
from storefront.infrastructure.marketplace.schemas import (
    ErrorPayload,
    category_list_adapter,
    item_list_adapter,
)

CATEGORIES_PATH = "/items/categories"


class MarketplaceHttpClient(MarketplacePort):
    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )
        self._logger = logging.getLogger(__name__)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_categories(self) -> list[Category]:
        resp = await self._get(CATEGORIES_PATH)
        payload = self._decode(resp, category_list_adapter)
        return [c.to_entity() for c in payload or []]

    async def search_items(self, query: QuerySpec) -> list[ItemSummary]:
        resp = await self._get(SEARCH_PATH, params=query.as_params())
        if resp.status_code == httpx.codes.NOT_FOUND:
            # The server answers 404 when no item matches.
            self._logger.info("Search matched nothing", extra={"status": resp.status_code})
            return []
        payload = self._decode(resp, item_list_adapter)
        return [item.to_entity() for item in payload or []]

    async def _get(self, path: str, params: list[tuple[str, str]] | None = None) -> httpx.Response:
        try:
            resp = await self._client.get(path, params=params)
        except httpx.TimeoutException as e:
            self._logger.error("Marketplace request timed out", extra={"reason": path})
            raise RemoteFetchError(f"Request to {path} timed out") from e
        except httpx.HTTPError as e:
            self._logger.error("Marketplace request failed", extra={"reason": str(e)})
            raise RemoteFetchError(f"Request to {path} failed: {e}") from e

        if resp.status_code >= 400 and resp.status_code != httpx.codes.NOT_FOUND:
            message = self._error_message(resp)
            self._logger.error(
                "Marketplace returned an error",
                extra={"status": resp.status_code, "reason": message},
            )
            raise RemoteFetchError(message, status_code=resp.status_code)
        return resp

    def _decode(self, resp: httpx.Response, adapter: TypeAdapter[Any]) -> Any:
        if resp.status_code >= 400:
            raise RemoteFetchError(self._error_message(resp), status_code=resp.status_code)
        try:
            return adapter.validate_json(resp.content)
        except ValidationError as e:
            self._logger.error(
                "Marketplace payload rejected",
                extra={"status": resp.status_code, "reason": f"{e.error_count()} error(s)"},
            )
            raise RemoteFetchError(
                f"Unexpected response from {resp.request.url.path}",
                status_code=resp.status_code,
            ) from e

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        try:
            message = ErrorPayload.model_validate_json(resp.content).message
        except ValidationError:
            message = None
        return message or resp.text or f"HTTP {resp.status_code}"
