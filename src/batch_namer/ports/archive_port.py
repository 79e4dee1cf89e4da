from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ArchivePort(Protocol):
    def build_archive(self, entries: list[tuple[str, bytes]]) -> bytes:
        """Pack (entry name, content) pairs, in order, into one archive blob."""
