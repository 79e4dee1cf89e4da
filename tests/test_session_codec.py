import json

import pytest

from batch_namer.domain.models import SessionState, SourceFile, create_file_item
from batch_namer.domain.session_codec import decode_state, deserialize_item, encode_state, serialize_item


def _item(name: str, data: bytes = b"abc", mime_type: str = "text/plain"):
    return create_file_item(SourceFile.from_bytes(name, data, mime_type), relative_path="docs/")


def test_serialize_item_excludes_content() -> None:
    payload = serialize_item(_item("a.txt", b"secret"))
    assert payload["file_name"] == "a.txt"
    assert payload["file_size"] == 6
    assert payload["file_type"] == "text/plain"
    assert payload["path"] == "docs/"
    assert "secret" not in json.dumps(payload)


def test_deserialize_item_builds_placeholder() -> None:
    item = _item("a.txt", b"secret")
    restored = deserialize_item(serialize_item(item))

    assert restored is not None
    assert restored.item_id == item.item_id
    assert restored.full_name == item.full_name
    assert restored.relative_path == "docs/"
    assert restored.source.placeholder is True
    assert restored.source.data == b""
    assert restored.source.size == 6
    assert restored.source.mime_type == "text/plain"


def test_deserialize_item_rejects_bad_entries() -> None:
    good = serialize_item(_item("a.txt"))
    missing = dict(good)
    del missing["current_name"]
    wrong_type = dict(good, original_ext=3)
    bad_size = dict(good, file_size="big")
    infinite_size = dict(good, file_size=float("inf"))

    assert deserialize_item(missing) is None
    assert deserialize_item(wrong_type) is None
    assert deserialize_item(bad_size) is None
    assert deserialize_item(infinite_size) is None


def test_encode_state_uses_top_level_keys() -> None:
    item = _item("a.txt")
    data = json.loads(encode_state(SessionState(files=[item], history=[[item]], redo_stack=[])))
    assert set(data) >= {"files", "history", "redoStack"}
    assert len(data["history"]) == 1


def test_decode_state_drops_bad_entries_and_empty_snapshots() -> None:
    good = serialize_item(_item("a.txt"))
    payload = json.dumps(
        {
            "files": [good, {"id": "broken"}, "not-a-dict"],
            "history": [[good], [{"id": "broken"}], []],
            "redoStack": "nope",
        }
    )
    state = decode_state(payload)

    assert [item.item_id for item in state.files] == [good["id"]]
    assert len(state.history) == 1
    assert state.redo_stack == []


def test_decode_state_rejects_invalid_payload() -> None:
    with pytest.raises(ValueError):
        decode_state("{not json")
    with pytest.raises(ValueError):
        decode_state("[1, 2]")
