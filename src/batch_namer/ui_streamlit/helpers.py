from __future__ import annotations

from typing import Any

from batch_namer.domain.models import FileItem, RenameParams, RuleKind, SourceFile

NAME_RULES: list[tuple[RuleKind, str]] = [
    (RuleKind.CLEAR_NAME, "Clear name"),
    (RuleKind.REPLACE, "Replace text"),
    (RuleKind.PREFIX, "Add prefix"),
    (RuleKind.SUFFIX, "Add suffix"),
    (RuleKind.CLEAR_BRACKETS, "Remove brackets"),
    (RuleKind.REMOVE_NUMBERS, "Remove numbers"),
    (RuleKind.NUMBERS_ONLY, "Keep numbers only"),
    (RuleKind.PADDING, "Pad with zeros"),
    (RuleKind.NUMBERING, "Add numbering"),
    (RuleKind.RANDOM, "Random name"),
]
EXT_RULES: list[tuple[RuleKind, str]] = [
    (RuleKind.EXT_DELETE, "Delete extension"),
    (RuleKind.EXT_ADD, "Add extension"),
    (RuleKind.EXT_CHANGE, "Change extension"),
]
PARAMETERLESS_RULES = frozenset(
    {
        RuleKind.CLEAR_NAME,
        RuleKind.CLEAR_BRACKETS,
        RuleKind.REMOVE_NUMBERS,
        RuleKind.NUMBERS_ONLY,
        RuleKind.RANDOM,
        RuleKind.EXT_DELETE,
    }
)
TEXT_RULES = frozenset({RuleKind.PREFIX, RuleKind.SUFFIX, RuleKind.EXT_ADD, RuleKind.EXT_CHANGE})
DEFAULT_FORM_DIGITS = 2


def rule_title(rule: RuleKind | None) -> str:
    for kind, label in NAME_RULES + EXT_RULES:
        if kind == rule:
            return label
    return "Settings"


def default_params() -> RenameParams:
    return RenameParams(search="", replace="", text="", start=1, digits=DEFAULT_FORM_DIGITS)


def source_from_upload(uploaded: Any) -> SourceFile:
    """Build a SourceFile from a Streamlit UploadedFile (name, type, getvalue())."""

    data = uploaded.getvalue()
    return SourceFile(
        filename=uploaded.name,
        size=len(data),
        mime_type=getattr(uploaded, "type", "") or "",
        data=data,
    )


def build_preview_rows(files: list[FileItem], duplicates: set[str]) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for index, item in enumerate(files, start=1):
        rows.append(
            {
                "no": index,
                "current_name": item.original_full_name,
                "new_name": item.full_name,
                "changed": item.is_changed,
                "duplicate": item.full_name in duplicates,
                "placeholder": item.source.placeholder,
                "path": item.relative_path,
            }
        )
    return rows


def format_new_name(row: dict[str, object]) -> str:
    name = str(row["new_name"]) or "(empty)"
    if row["duplicate"]:
        return f":red[{name}] (duplicate)"
    if row["changed"]:
        return f":blue[{name}]"
    return name
