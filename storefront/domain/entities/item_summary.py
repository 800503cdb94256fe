from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ItemStatus(int, Enum):
    INITIAL = 1
    ON_SALE = 2
    SOLD_OUT = 3


@dataclass(frozen=True)
class ItemSummary:
    id: int
    name: str
    price: int
    status: ItemStatus
    category_name: str

    @property
    def is_sold_out(self) -> bool:
        return self.status is ItemStatus.SOLD_OUT
