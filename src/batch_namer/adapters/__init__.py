from .memory_storage import MemoryStorage
from .sqlite_storage import SQLiteStorage
from .zip_archive import ZipArchiveAdapter

__all__ = ["MemoryStorage", "SQLiteStorage", "ZipArchiveAdapter"]
