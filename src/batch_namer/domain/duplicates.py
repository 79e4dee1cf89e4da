from __future__ import annotations

from collections import Counter

from .models import FileItem


def find_duplicates(items: list[FileItem]) -> set[str]:
    """
    Return the full names that more than one item would end up with.

    Example:
        names "a.txt", "a.txt", "b.txt" -> {"a.txt"}
    """
    counts = Counter(item.full_name for item in items)
    return {name for name, count in counts.items() if count > 1}


def count_changed(items: list[FileItem]) -> int:
    return sum(1 for item in items if item.is_changed)
