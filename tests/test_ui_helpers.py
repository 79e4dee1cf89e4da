from batch_namer.domain.models import RuleKind, SourceFile, create_file_item
from batch_namer.ui_streamlit.helpers import (
    EXT_RULES,
    NAME_RULES,
    PARAMETERLESS_RULES,
    build_preview_rows,
    format_new_name,
    rule_title,
    source_from_upload,
)


class FakeUpload:
    def __init__(self, name: str, data: bytes, mime_type: str) -> None:
        self.name = name
        self.type = mime_type
        self._data = data

    def getvalue(self) -> bytes:
        return self._data


def test_every_selectable_rule_has_a_label() -> None:
    selectable = {rule for rule, _ in NAME_RULES + EXT_RULES}
    assert selectable == set(RuleKind) - {RuleKind.CLEAR_POS}
    assert PARAMETERLESS_RULES <= selectable
    assert rule_title(RuleKind.NUMBERING) == "Add numbering"
    assert rule_title(RuleKind.CLEAR_POS) == "Settings"


def test_source_from_upload() -> None:
    source = source_from_upload(FakeUpload("a.png", b"\x89PNG", "image/png"))
    assert source.filename == "a.png"
    assert source.size == 4
    assert source.mime_type == "image/png"
    assert source.placeholder is False


def test_build_preview_rows_flags() -> None:
    first = create_file_item(SourceFile.from_bytes("a.txt", b""))
    second = create_file_item(SourceFile.from_bytes("b.txt", b"")).renamed("a", "txt")
    rows = build_preview_rows([first, second], {"a.txt"})

    assert [row["no"] for row in rows] == [1, 2]
    assert rows[0]["changed"] is False
    assert rows[1]["changed"] is True
    assert rows[1]["current_name"] == "b.txt"
    assert all(row["duplicate"] for row in rows)
    assert "duplicate" in format_new_name(rows[1])


def test_format_new_name_empty() -> None:
    row = {"new_name": "", "duplicate": False, "changed": True}
    assert format_new_name(row) == ":blue[(empty)]"
