from __future__ import annotations

from storefront.application.ports.slot_store import SlotStorePort


class MemorySlotStore(SlotStorePort):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._slots.get(key)

    def put(self, key: str, value: str) -> None:
        self._slots[key] = value
