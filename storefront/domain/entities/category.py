from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.entities.filter_state import ALL_CATEGORIES


@dataclass(frozen=True)
class Category:
    id: int
    name: str


ALL_CATEGORIES_OPTION = Category(id=ALL_CATEGORIES, name="All")
