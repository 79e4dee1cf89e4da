from __future__ import annotations

import json
import logging

from .models import FileItem, SessionState, SourceFile

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def serialize_item(item: FileItem) -> dict:
    """Metadata-only view of an item; source bytes are never persisted."""

    return {
        "id": item.item_id,
        "original_name": item.original_name,
        "original_ext": item.original_ext,
        "current_name": item.current_name,
        "current_ext": item.current_ext,
        "path": item.relative_path,
        "file_name": item.source.filename,
        "file_size": item.source.size,
        "file_type": item.source.mime_type,
    }


def deserialize_item(data: dict) -> FileItem | None:
    """
    Rebuild an item around a zero-byte placeholder source.

    Returns None when the entry is not usable; callers drop it.
    """
    try:
        source = SourceFile.make_placeholder(
            filename=str(data["file_name"]),
            size=int(data.get("file_size") or 0),
            mime_type=str(data.get("file_type") or ""),
        )
        return FileItem(
            item_id=_required_str(data, "id"),
            source=source,
            original_name=_required_str(data, "original_name"),
            original_ext=_required_str(data, "original_ext"),
            current_name=_required_str(data, "current_name"),
            current_ext=_required_str(data, "current_ext"),
            relative_path=str(data.get("path") or ""),
        )
    except (KeyError, TypeError, ValueError, OverflowError, AttributeError) as exc:
        logger.warning("Dropping stored file entry that cannot be restored: %s", exc)
        return None


def encode_state(state: SessionState) -> str:
    payload = {
        "version": SCHEMA_VERSION,
        "files": [serialize_item(item) for item in state.files],
        "history": [[serialize_item(item) for item in items] for items in state.history],
        "redoStack": [[serialize_item(item) for item in items] for items in state.redo_stack],
    }
    return json.dumps(payload, ensure_ascii=False)


def decode_state(payload: str) -> SessionState:
    """
    Parse a stored payload. Raises ValueError when the payload itself is unusable;
    individual bad entries and empty snapshots are dropped instead.
    """
    data = json.loads(payload)
    if not isinstance(data, dict):
        raise ValueError("Stored session must be a JSON object")
    return SessionState(
        files=_restore_items(data.get("files")),
        history=_restore_snapshots(data.get("history")),
        redo_stack=_restore_snapshots(data.get("redoStack")),
    )


def _restore_items(raw: object) -> list[FileItem]:
    if not isinstance(raw, list):
        return []
    items: list[FileItem] = []
    for entry in raw:
        if not isinstance(entry, dict):
            logger.warning("Dropping stored file entry of type %s", type(entry).__name__)
            continue
        item = deserialize_item(entry)
        if item is not None:
            items.append(item)
    return items


def _restore_snapshots(raw: object) -> list[list[FileItem]]:
    if not isinstance(raw, list):
        return []
    snapshots = [_restore_items(entry) for entry in raw]
    return [items for items in snapshots if items]


def _required_str(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value
