from __future__ import annotations

from batch_namer.ports.storage_port import StoragePort


class MemoryStorage(StoragePort):
    """Process-local slots, used when durable persistence is disabled."""

    def __init__(self) -> None:
        self._slots: dict[str, str] = {}

    def read_slot(self, key: str) -> str | None:
        return self._slots.get(key)

    def write_slot(self, key: str, payload: str) -> None:
        self._slots[key] = payload

    def delete_slot(self, key: str) -> None:
        self._slots.pop(key, None)
