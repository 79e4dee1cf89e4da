from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StoragePort(Protocol):
    def read_slot(self, key: str) -> str | None:
        """Return the payload stored under key, or None if missing."""

    def write_slot(self, key: str, payload: str) -> None:
        """Store payload under key, replacing any previous value."""

    def delete_slot(self, key: str) -> None:
        """Remove the payload stored under key, if any."""
