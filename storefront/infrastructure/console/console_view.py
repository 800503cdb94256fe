from __future__ import annotations

import logging
import sys
from typing import TextIO

from storefront.application.ports.search_view import ItemListPort, NotifierPort
from storefront.domain.entities.item_summary import ItemSummary


class ConsoleItemList(ItemListPort):
    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out or sys.stdout

    def set_items(self, items: list[ItemSummary]) -> None:
        if not items:
            print("(no items)", file=self._out)
            return
        for item in items:
            marker = " [SOLD OUT]" if item.is_sold_out else ""
            print(
                f"  #{item.id:<5} {item.name:<30} {item.price:>10} JPY  {item.category_name}{marker}",
                file=self._out,
            )


class ConsoleNotifier(NotifierPort):
    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out or sys.stderr
        self._logger = logging.getLogger(__name__)

    def error(self, message: str) -> None:
        self._logger.debug("Notification shown", extra={"reason": message})
        print(f"! {message}", file=self._out)
