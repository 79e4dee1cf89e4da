from __future__ import annotations

import io
import zipfile

from batch_namer.ports.archive_port import ArchivePort


class ZipArchiveAdapter(ArchivePort):
    def __init__(self, compression: int = zipfile.ZIP_DEFLATED) -> None:
        self._compression = compression

    def build_archive(self, entries: list[tuple[str, bytes]]) -> bytes:
        buffer = io.BytesIO()
        try:
            with zipfile.ZipFile(buffer, "w", compression=self._compression) as archive:
                for name, content in entries:
                    archive.writestr(name, content)
        except (zipfile.BadZipFile, ValueError, OSError) as exc:
            raise RuntimeError("Failed to build zip archive") from exc
        return buffer.getvalue()
