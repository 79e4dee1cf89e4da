from __future__ import annotations

import logging
from dataclasses import replace

from batch_namer.domain.duplicates import count_changed, find_duplicates
from batch_namer.domain.history import History
from batch_namer.domain.models import (
    FileItem,
    RenameParams,
    RuleKind,
    SessionState,
    SourceFile,
    create_file_item,
)
from batch_namer.domain.rename_logic import apply_rule
from batch_namer.services.persistence_service import PersistenceService

logger = logging.getLogger(__name__)


class RenameService:
    """
    Owns the working list and its undo/redo history.

    Callers read projections and submit whole operations; every mutation is
    mirrored to the persistence service.
    """

    def __init__(self, persistence: PersistenceService) -> None:
        self._persistence = persistence
        self._files: list[FileItem] = []
        self._history = History()

    @property
    def files(self) -> list[FileItem]:
        return list(self._files)

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def duplicates(self) -> set[str]:
        return find_duplicates(self._files)

    def changed_count(self) -> int:
        return count_changed(self._files)

    def restore(self) -> SessionState:
        state = self._persistence.load()
        self._files = list(state.files)
        self._history = History(state.history, state.redo_stack)
        return state

    def add_files(
        self, sources: list[SourceFile], relative_paths: list[str] | None = None
    ) -> list[FileItem]:
        paths = relative_paths or []
        added = [
            create_file_item(source, paths[index] if index < len(paths) else "")
            for index, source in enumerate(sources)
        ]
        if not added:
            return []
        self._files.extend(added)
        logger.info("Added %d files", len(added))
        self._persist()
        return added

    def apply_rule(self, rule: RuleKind, params: RenameParams | None = None) -> list[FileItem]:
        self._history.before_transform(self._files)
        self._files = apply_rule(self._files, rule, params or RenameParams())
        self._history.after_transform()
        logger.info("Applied %s to %d files", rule.value, len(self._files))
        self._persist()
        return self.files

    def undo(self) -> bool:
        previous = self._history.undo(self._files)
        if previous is None:
            return False
        self._files = previous
        self._persist()
        return True

    def redo(self) -> bool:
        following = self._history.redo(self._files)
        if following is None:
            return False
        self._files = following
        self._persist()
        return True

    def remove(self, item_id: str) -> bool:
        remaining = [item for item in self._files if item.item_id != item_id]
        if len(remaining) == len(self._files):
            return False
        self._files = remaining
        self._persist()
        return True

    def move(self, index: int, offset: int) -> bool:
        target = index + offset
        if offset == 0 or not (0 <= index < len(self._files)) or not (0 <= target < len(self._files)):
            return False
        files = list(self._files)
        files[index], files[target] = files[target], files[index]
        self._files = files
        self._persist()
        return True

    def reorder(self, item_ids: list[str]) -> bool:
        by_id = {item.item_id: item for item in self._files}
        if len(item_ids) != len(by_id) or set(item_ids) != set(by_id):
            return False
        self._files = [by_id[item_id] for item_id in item_ids]
        self._persist()
        return True

    def reattach(self, sources: list[SourceFile]) -> int:
        """
        Swap placeholder sources for uploaded content with the same filename.

        Names are left alone; undo/redo snapshots pick up the same content.
        Returns how many items were updated.
        """
        by_filename = {source.filename: source for source in sources if not source.placeholder}
        attached: dict[str, SourceFile] = {}
        for item in self._files:
            source = by_filename.get(item.source.filename)
            if item.source.placeholder and source is not None:
                attached[item.item_id] = source
        if not attached:
            return 0

        def _swap(items: list[FileItem]) -> list[FileItem]:
            return [
                replace(item, source=attached[item.item_id])
                if item.item_id in attached and item.source.placeholder
                else item
                for item in items
            ]

        self._files = _swap(self._files)
        self._history = History(
            [_swap(items) for items in self._history.history],
            [_swap(items) for items in self._history.redo_stack],
        )
        logger.info("Re-attached content to %d files", len(attached))
        self._persist()
        return len(attached)

    def clear(self) -> None:
        self._files = []
        self._history.clear()
        self._persistence.clear()

    def _persist(self) -> None:
        self._persistence.save(
            SessionState(
                files=list(self._files),
                history=self._history.history,
                redo_stack=self._history.redo_stack,
            )
        )
