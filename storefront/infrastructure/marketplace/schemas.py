from __future__ import annotations

from pydantic import BaseModel, ConfigDict, TypeAdapter

from storefront.domain.entities.category import Category
from storefront.domain.entities.item_summary import ItemStatus, ItemSummary


class CategoryPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str

    def to_entity(self) -> Category:
        return Category(id=self.id, name=self.name)


class ItemSummaryPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    price: int
    status: ItemStatus = ItemStatus.ON_SALE
    category_name: str = ""

    def to_entity(self) -> ItemSummary:
        return ItemSummary(
            id=self.id,
            name=self.name,
            price=self.price,
            status=self.status,
            category_name=self.category_name,
        )


class ErrorPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str | None = None


# The backend encodes an empty Go slice as `null`.
category_list_adapter = TypeAdapter(list[CategoryPayload] | None)
item_list_adapter = TypeAdapter(list[ItemSummaryPayload] | None)
