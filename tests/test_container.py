from batch_namer.adapters.memory_storage import MemoryStorage
from batch_namer.adapters.sqlite_storage import SQLiteStorage
from batch_namer.container import build_services
from batch_namer.domain.models import SourceFile


def test_build_services_restores_saved_session(tmp_path) -> None:
    db_path = str(tmp_path / "state.db")
    services = build_services(db_path, state_key="test-state", persist=True)
    assert isinstance(services["storage"], SQLiteStorage)
    services["rename_service"].add_files([SourceFile.from_bytes("a.txt", b"a")])

    reloaded = build_services(db_path, state_key="test-state", persist=True)

    assert [item.full_name for item in reloaded["rename_service"].files] == ["a.txt"]


def test_build_services_without_persistence(tmp_path) -> None:
    services = build_services(str(tmp_path / "unused.db"), persist=False)
    assert isinstance(services["storage"], MemoryStorage)
    assert not (tmp_path / "unused.db").exists()


def test_build_services_falls_back_when_sqlite_unavailable(tmp_path) -> None:
    services = build_services(str(tmp_path / "missing" / "state.db"), persist=True)
    assert isinstance(services["storage"], MemoryStorage)
    assert services["rename_service"].files == []
