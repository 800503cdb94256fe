from __future__ import annotations

import threading
from pathlib import Path

from storefront.application.ports.slot_store import SlotStorePort


class JsonSlotStore(SlotStorePort):
    """One file per key under `data_dir`, written atomically."""

    def __init__(self, data_dir: str = "./data/slots") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def _get_file_path(self, key: str) -> Path:
        return self._data_dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        file_path = self._get_file_path(key)
        with self._lock:
            if not file_path.exists():
                return None
            with open(file_path, "r", encoding="utf-8") as f:
                return f.read()

    def put(self, key: str, value: str) -> None:
        file_path = self._get_file_path(key)
        temp_path = file_path.with_suffix(".json.tmp")

        with self._lock:
            try:
                with open(temp_path, "w", encoding="utf-8") as f:
                    f.write(value)
                temp_path.replace(file_path)
            except OSError:
                temp_path.unlink(missing_ok=True)
                raise
