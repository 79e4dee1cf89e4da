import io
import zipfile
from unittest.mock import Mock

import pytest

from batch_namer.adapters.zip_archive import ZipArchiveAdapter
from batch_namer.domain.models import SourceFile, create_file_item
from batch_namer.services.export_service import ExportBlockedError, ExportService


def _item(name: str, data: bytes):
    return create_file_item(SourceFile.from_bytes(name, data))


def test_export_writes_entries_in_list_order() -> None:
    items = [_item("b.txt", b"bee"), _item("a.txt", b"ay").renamed("c", "md")]
    service = ExportService(ZipArchiveAdapter(), filename_prefix="renamed_files")

    result = service.export(items)

    assert result is not None
    assert result.entry_count == 2
    assert result.filename.startswith("renamed_files_")
    assert result.filename.endswith(".zip")
    with zipfile.ZipFile(io.BytesIO(result.data)) as archive:
        assert archive.namelist() == ["b.txt", "c.md"]
        assert archive.read("c.md") == b"ay"


def test_export_blocks_on_duplicates_before_archiving() -> None:
    archive = Mock()
    items = [_item("a.txt", b"1"), _item("a.txt", b"2"), _item("b.txt", b"3")]
    service = ExportService(archive)

    with pytest.raises(ExportBlockedError) as excinfo:
        service.export(items)

    assert excinfo.value.duplicates == {"a.txt"}
    archive.build_archive.assert_not_called()


def test_export_empty_list_produces_nothing() -> None:
    archive = Mock()
    assert ExportService(archive).export([]) is None
    archive.build_archive.assert_not_called()


def test_export_reports_placeholder_items() -> None:
    placeholder = create_file_item(SourceFile.make_placeholder("p.bin", 10, "application/octet-stream"))
    service = ExportService(ZipArchiveAdapter())

    result = service.export([placeholder, _item("a.txt", b"x")])

    assert result is not None
    assert result.placeholder_names == ["p.bin"]
    with zipfile.ZipFile(io.BytesIO(result.data)) as archive:
        assert archive.read("p.bin") == b""


def test_export_uses_snapshot_of_list() -> None:
    archive = Mock()
    archive.build_archive.return_value = b"zip"
    items = [_item("a.txt", b"1")]
    service = ExportService(archive)

    service.export(items)
    items.append(_item("b.txt", b"2"))

    entries = archive.build_archive.call_args.args[0]
    assert entries == [("a.txt", b"1")]
