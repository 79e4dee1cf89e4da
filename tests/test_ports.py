from batch_namer.adapters.memory_storage import MemoryStorage
from batch_namer.adapters.zip_archive import ZipArchiveAdapter
from batch_namer.ports.archive_port import ArchivePort
from batch_namer.ports.storage_port import StoragePort


class DummyStorage:
    def read_slot(self, key: str) -> str | None:
        return None

    def write_slot(self, key: str, payload: str) -> None:
        return None

    def delete_slot(self, key: str) -> None:
        return None


def test_storage_port_runtime_checkable() -> None:
    assert isinstance(DummyStorage(), StoragePort)
    assert isinstance(MemoryStorage(), StoragePort)


def test_archive_port_runtime_checkable() -> None:
    assert isinstance(ZipArchiveAdapter(), ArchivePort)
    assert not isinstance(DummyStorage(), ArchivePort)
