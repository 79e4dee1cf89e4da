from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from uuid import uuid4


class RuleKind(str, Enum):
    """Renaming rules selectable from the UI."""

    CLEAR_NAME = "CLEAR_NAME"
    REPLACE = "REPLACE"
    PREFIX = "PREFIX"
    SUFFIX = "SUFFIX"
    CLEAR_POS = "CLEAR_POS"
    CLEAR_BRACKETS = "CLEAR_BRACKETS"
    REMOVE_NUMBERS = "REMOVE_NUMBERS"
    NUMBERS_ONLY = "NUMBERS_ONLY"
    PADDING = "PADDING"
    NUMBERING = "NUMBERING"
    RANDOM = "RANDOM"
    EXT_DELETE = "EXT_DELETE"
    EXT_ADD = "EXT_ADD"
    EXT_CHANGE = "EXT_CHANGE"


def parse_rule_kind(value: str) -> RuleKind:
    """Parse a rule name into a RuleKind enum (case-insensitive)."""

    normalized = value.strip().upper()
    for kind in RuleKind:
        if kind.value == normalized:
            return kind
    raise ValueError(f"Unsupported rule: {value}")


@dataclass(frozen=True)
class SourceFile:
    """Original file content as received at ingestion. Never mutated."""

    filename: str
    size: int
    mime_type: str
    data: bytes = field(default=b"", repr=False)
    placeholder: bool = False

    @classmethod
    def from_bytes(cls, filename: str, data: bytes, mime_type: str = "") -> "SourceFile":
        return cls(filename=filename, size=len(data), mime_type=mime_type, data=data)

    @classmethod
    def make_placeholder(cls, filename: str, size: int, mime_type: str) -> "SourceFile":
        return cls(filename=filename, size=size, mime_type=mime_type, data=b"", placeholder=True)


@dataclass(frozen=True)
class FileItem:
    item_id: str
    source: SourceFile
    original_name: str
    original_ext: str
    current_name: str
    current_ext: str
    relative_path: str = ""

    @property
    def full_name(self) -> str:
        return join_filename(self.current_name, self.current_ext)

    @property
    def original_full_name(self) -> str:
        return join_filename(self.original_name, self.original_ext)

    @property
    def is_changed(self) -> bool:
        return self.full_name != self.original_full_name

    def renamed(self, name: str, ext: str) -> "FileItem":
        return replace(self, current_name=name, current_ext=ext)


@dataclass
class RenameParams:
    search: str | None = None
    replace: str | None = None
    text: str | None = None
    start: int | None = None
    digits: int | None = None


@dataclass
class SessionState:
    files: list[FileItem] = field(default_factory=list)
    history: list[list[FileItem]] = field(default_factory=list)
    redo_stack: list[list[FileItem]] = field(default_factory=list)


def split_filename(raw_name: str) -> tuple[str, str]:
    """
    Split a raw filename into (name, extension) at the last dot.

    Examples:
        >>> split_filename("photo.final.jpg")
        ('photo.final', 'jpg')
        >>> split_filename("README")
        ('README', '')
        >>> split_filename(".bashrc")
        ('', 'bashrc')
    """
    name, dot, ext = raw_name.rpartition(".")
    if dot == "":
        return raw_name, ""
    return name, ext


def join_filename(name: str, ext: str) -> str:
    return f"{name}.{ext}" if ext else name


def create_file_item(source: SourceFile, relative_path: str = "") -> FileItem:
    name, ext = split_filename(source.filename)
    return FileItem(
        item_id=uuid4().hex,
        source=source,
        original_name=name,
        original_ext=ext,
        current_name=name,
        current_ext=ext,
        relative_path=relative_path,
    )
