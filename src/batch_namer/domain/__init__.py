from .duplicates import count_changed, find_duplicates
from .history import History
from .models import (
    FileItem,
    RenameParams,
    RuleKind,
    SessionState,
    SourceFile,
    create_file_item,
    parse_rule_kind,
    split_filename,
)
from .rename_logic import apply_rule

__all__ = [
    "FileItem",
    "History",
    "RenameParams",
    "RuleKind",
    "SessionState",
    "SourceFile",
    "apply_rule",
    "count_changed",
    "create_file_item",
    "find_duplicates",
    "parse_rule_kind",
    "split_filename",
]
