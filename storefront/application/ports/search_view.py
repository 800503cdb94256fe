from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.entities.item_summary import ItemSummary


class ItemListPort(ABC):
    @abstractmethod
    def set_items(self, items: list[ItemSummary]) -> None:
        raise NotImplementedError


class NotifierPort(ABC):
    @abstractmethod
    def error(self, message: str) -> None:
        raise NotImplementedError
