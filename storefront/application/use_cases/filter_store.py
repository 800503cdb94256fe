from __future__ import annotations

import logging

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from storefront.application.dto.persisted_filter import PersistedFilterDTO
from storefront.application.exceptions import PersistenceReadError, PersistenceWriteError
from storefront.application.ports.slot_store import SlotStorePort
from storefront.domain.entities.filter_state import FilterState

DEFAULT_SLOT_KEY = "searchkeys"


class FilterStore:
    """Keeps the last edited filter in a single key/value slot."""

    def __init__(self, slots: SlotStorePort, key: str = DEFAULT_SLOT_KEY) -> None:
        self._slots = slots
        self._key = key
        self._logger = logging.getLogger(__name__)

    def load(self) -> FilterState:
        """Return the stored filter, or defaults when the slot is empty or unreadable."""
        try:
            return self._read()
        except PersistenceReadError as e:
            self._logger.warning(
                "Stored filter unusable, falling back to defaults",
                extra={"reason": str(e)},
            )
            return FilterState()

    def save(self, state: FilterState) -> None:
        """Overwrite the slot with the full filter. Raises PersistenceWriteError on failure."""
        try:
            payload = PersistedFilterDTO.from_state(state).model_dump_json()
            self._slots.put(self._key, payload)
        except (PydanticSerializationError, UnicodeEncodeError, OSError) as e:
            raise PersistenceWriteError(f"slot {self._key!r} not written: {e}") from e

    def _read(self) -> FilterState:
        try:
            raw = self._slots.get(self._key)
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceReadError(f"slot {self._key!r} unreadable: {e}") from e
        if raw is None:
            return FilterState()
        try:
            return PersistedFilterDTO.model_validate_json(raw).to_state()
        except ValidationError as e:
            raise PersistenceReadError(
                f"slot {self._key!r} holds an invalid filter: {e.error_count()} error(s)"
            ) from e
