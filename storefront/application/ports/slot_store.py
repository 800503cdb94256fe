from abc import ABC, abstractmethod


class SlotStorePort(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the raw string held in the slot, or None when the slot is empty."""
        raise NotImplementedError

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """Overwrite the slot with `value`."""
        raise NotImplementedError
