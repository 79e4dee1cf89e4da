from .export_service import ArchiveExport, ExportBlockedError, ExportService
from .persistence_service import PersistenceService
from .rename_service import RenameService

__all__ = [
    "ArchiveExport",
    "ExportBlockedError",
    "ExportService",
    "PersistenceService",
    "RenameService",
]
