from __future__ import annotations

from .models import FileItem


def snapshot(items: list[FileItem]) -> list[FileItem]:
    """FileItem is frozen, so a fresh list is an independent copy."""

    return list(items)


class History:
    """Undo/redo stacks of working-list snapshots, oldest first."""

    def __init__(
        self,
        history: list[list[FileItem]] | None = None,
        redo_stack: list[list[FileItem]] | None = None,
    ) -> None:
        self._history: list[list[FileItem]] = [snapshot(items) for items in history or []]
        self._redo: list[list[FileItem]] = [snapshot(items) for items in redo_stack or []]

    @property
    def history(self) -> list[list[FileItem]]:
        return [snapshot(items) for items in self._history]

    @property
    def redo_stack(self) -> list[list[FileItem]]:
        return [snapshot(items) for items in self._redo]

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def before_transform(self, items: list[FileItem]) -> None:
        self._history.append(snapshot(items))

    def after_transform(self) -> None:
        self._redo.clear()

    def undo(self, current: list[FileItem]) -> list[FileItem] | None:
        if not self._history:
            return None
        previous = self._history.pop()
        self._redo.append(snapshot(current))
        return snapshot(previous)

    def redo(self, current: list[FileItem]) -> list[FileItem] | None:
        if not self._redo:
            return None
        following = self._redo.pop()
        self._history.append(snapshot(current))
        return snapshot(following)

    def clear(self) -> None:
        self._history.clear()
        self._redo.clear()
