from .archive_port import ArchivePort
from .storage_port import StoragePort

__all__ = ["ArchivePort", "StoragePort"]
