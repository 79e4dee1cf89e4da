from __future__ import annotations

import logging
from dataclasses import dataclass, field

from batch_namer.domain.duplicates import find_duplicates
from batch_namer.domain.models import FileItem
from batch_namer.ports.archive_port import ArchivePort
from batch_namer.services.time_utils import archive_filename

logger = logging.getLogger(__name__)


class ExportBlockedError(RuntimeError):
    def __init__(self, duplicates: set[str]) -> None:
        self.duplicates = duplicates
        names = ", ".join(sorted(duplicates))
        super().__init__(f"Duplicate file names must be resolved before export: {names}")


@dataclass
class ArchiveExport:
    filename: str
    data: bytes
    entry_count: int
    placeholder_names: list[str] = field(default_factory=list)


class ExportService:
    def __init__(self, archive: ArchivePort, filename_prefix: str = "renamed_files") -> None:
        self._archive = archive
        self._filename_prefix = filename_prefix

    def export(self, items: list[FileItem]) -> ArchiveExport | None:
        """
        Pack every item under its full display name, in list order.

        Returns None for an empty list. Raises ExportBlockedError before any
        archive work when two items would share a name.
        """
        snapshot = list(items)
        if not snapshot:
            return None
        duplicates = find_duplicates(snapshot)
        if duplicates:
            raise ExportBlockedError(duplicates)

        entries = [(item.full_name, item.source.data) for item in snapshot]
        placeholders = [item.full_name for item in snapshot if item.source.placeholder]
        data = self._archive.build_archive(entries)
        filename = archive_filename(self._filename_prefix)
        logger.info("Exported %d files to %s", len(entries), filename)
        if placeholders:
            logger.warning("%d exported files have no content attached", len(placeholders))
        return ArchiveExport(
            filename=filename,
            data=data,
            entry_count=len(entries),
            placeholder_names=placeholders,
        )
