"""
Tests for filter persistence in the `searchkeys` slot.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from storefront.application.exceptions import PersistenceWriteError
from storefront.application.ports.slot_store import SlotStorePort
from storefront.application.use_cases.filter_store import FilterStore
from storefront.domain.entities.filter_state import FilterState
from storefront.infrastructure.store.json_store import JsonSlotStore
from storefront.infrastructure.store.memory_store import MemorySlotStore


class _UnreadableSlots(SlotStorePort):
    def get(self, key: str) -> str | None:
        raise OSError("disk gone")

    def put(self, key: str, value: str) -> None:
        raise OSError("disk gone")


def test_load_without_slot_returns_defaults():
    store = FilterStore(MemorySlotStore())

    assert store.load() == FilterState()


def test_json_store_round_trip():
    """Test that a saved filter is restored exactly after a restart."""
    with tempfile.TemporaryDirectory() as tmpdir:
        state = FilterState(
            category=3,
            keyword="バッグ bag",
            price_min=100,
            price_max=5000,
            include_sold_out=True,
        )
        FilterStore(JsonSlotStore(data_dir=tmpdir)).save(state)

        # A fresh store over the same directory stands in for a new process.
        restored = FilterStore(JsonSlotStore(data_dir=tmpdir)).load()

        assert restored == state


def test_slot_file_layout():
    with tempfile.TemporaryDirectory() as tmpdir:
        FilterStore(JsonSlotStore(data_dir=tmpdir)).save(FilterState(keyword="lamp"))

        data = json.loads((Path(tmpdir) / "searchkeys.json").read_text(encoding="utf-8"))

        assert data == {
            "category": -1,
            "keyword": "lamp",
            "price_min": 1,
            "price_max": 99999999,
            "is_include_soldout": False,
        }
        assert not (Path(tmpdir) / "searchkeys.json.tmp").exists()


def test_save_overwrites_previous_content():
    slots = MemorySlotStore()
    store = FilterStore(slots)

    store.save(FilterState(keyword="first", category=2))
    store.save(FilterState(keyword="second"))

    assert store.load() == FilterState(keyword="second")


def test_corrupt_slot_falls_back_to_defaults():
    for raw in ("{not json", "null", "[]", '{"price_min": "cheap"}', '{"category": "all"}'):
        store = FilterStore(MemorySlotStore({"searchkeys": raw}))
        assert store.load() == FilterState(), raw


def test_partial_slot_fills_missing_fields_with_defaults():
    store = FilterStore(MemorySlotStore({"searchkeys": '{"keyword": "desk"}'}))

    assert store.load() == FilterState(keyword="desk")


def test_numeric_string_category_is_coerced():
    raw = json.dumps({"category": "4", "keyword": "", "price_min": 1, "price_max": 10, "is_include_soldout": False})
    store = FilterStore(MemorySlotStore({"searchkeys": raw}))

    assert store.load().category == 4


def test_unreadable_storage_falls_back_to_defaults():
    store = FilterStore(_UnreadableSlots())

    assert store.load() == FilterState()


def test_custom_slot_key():
    slots = MemorySlotStore()
    FilterStore(slots, key="other").save(FilterState(keyword="x"))

    assert slots.get("other") is not None
    assert slots.get("searchkeys") is None


def test_non_utf8_slot_falls_back_to_defaults():
    """Test that a slot file with undecodable bytes is treated as corrupt."""
    with tempfile.TemporaryDirectory() as tmpdir:
        (Path(tmpdir) / "searchkeys.json").write_bytes(b'{"keyword": "\xff\xfe"}')

        store = FilterStore(JsonSlotStore(data_dir=tmpdir))

        assert store.load() == FilterState()


def test_unserializable_keyword_raises_write_error():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = FilterStore(JsonSlotStore(data_dir=tmpdir))
        store.save(FilterState(keyword="lamp"))

        with pytest.raises(PersistenceWriteError):
            store.save(FilterState(keyword="bag\udcff"))

        assert store.load() == FilterState(keyword="lamp")


def test_unwritable_storage_raises_write_error():
    with pytest.raises(PersistenceWriteError):
        FilterStore(_UnreadableSlots()).save(FilterState())


if __name__ == "__main__":
    test_load_without_slot_returns_defaults()
    test_json_store_round_trip()
    test_slot_file_layout()
    test_save_overwrites_previous_content()
    test_corrupt_slot_falls_back_to_defaults()
    test_partial_slot_fills_missing_fields_with_defaults()
    test_numeric_string_category_is_coerced()
    test_unreadable_storage_falls_back_to_defaults()
    test_custom_slot_key()
    test_non_utf8_slot_falls_back_to_defaults()
    test_unserializable_keyword_raises_write_error()
    test_unwritable_storage_raises_write_error()
    print("All tests passed!")
