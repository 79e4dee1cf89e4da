from __future__ import annotations

import logging
from typing import Any

from batch_namer.adapters.memory_storage import MemoryStorage
from batch_namer.adapters.sqlite_storage import SQLiteStorage
from batch_namer.adapters.zip_archive import ZipArchiveAdapter
from batch_namer.ports.storage_port import StoragePort
from batch_namer.services.export_service import ExportService
from batch_namer.services.persistence_service import PersistenceService
from batch_namer.services.rename_service import RenameService
from batch_namer.settings import EXPORT_PREFIX, PERSIST_ENABLED, STATE_KEY

logger = logging.getLogger(__name__)


def build_services(
    sqlite_path: str,
    state_key: str = STATE_KEY,
    persist: bool = PERSIST_ENABLED,
) -> dict[str, Any]:
    storage: StoragePort = MemoryStorage()
    if persist:
        try:
            storage = SQLiteStorage(sqlite_path)
        except RuntimeError:
            logger.exception("Saved sessions unavailable at %s; keeping state in memory", sqlite_path)
    persistence_service = PersistenceService(storage, state_key)
    rename_service = RenameService(persistence_service)
    rename_service.restore()
    archive = ZipArchiveAdapter()
    return {
        "rename_service": rename_service,
        "persistence_service": persistence_service,
        "export_service": ExportService(archive, filename_prefix=EXPORT_PREFIX),
        "archive": archive,
        "storage": storage,
    }
