from __future__ import annotations

import logging
import re
from typing import Callable
from uuid import uuid4

from .models import FileItem, RenameParams, RuleKind

logger = logging.getLogger(__name__)

_BRACKETED_SPAN = re.compile(r"\[.*?\]|\(.*?\)|\{.*?\}")
_ASCII_DIGITS = frozenset("0123456789")
RANDOM_NAME_LENGTH = 12

# Declared in the rule set but without agreed semantics; they pass through.
UNMAPPED_RULES = frozenset({RuleKind.CLEAR_POS})

_RuleFn = Callable[[str, str, int, RenameParams], tuple[str, str]]


def apply_rule(items: list[FileItem], rule: RuleKind, params: RenameParams) -> list[FileItem]:
    """
    Apply one renaming rule to every item and return a new list.

    Each item is recomputed from its current name/extension and its zero-based
    position in ``items``. The input list and its items are left untouched.
    Rules without a transformation (see UNMAPPED_RULES) return the items as-is.

    Example:
        items = [create_file_item(SourceFile.from_bytes("a.txt", b""))]
        apply_rule(items, RuleKind.PREFIX, RenameParams(text="x_"))[0].full_name
        # 'x_a.txt'
    """
    transform = _RULES.get(rule)
    if transform is None:
        logger.debug("Rule %s has no transformation; items unchanged", rule)
        return list(items)

    renamed: list[FileItem] = []
    for index, item in enumerate(items):
        name, ext = transform(item.current_name, item.current_ext, index, params)
        renamed.append(item.renamed(name, ext))
    return renamed


def replace_literal(name: str, search: str, replacement: str) -> str:
    if not search:
        return name
    return name.replace(search, replacement)


def clear_brackets(name: str) -> str:
    """
    Remove every [..], (..) and {..} span, delimiters included.

    Examples:
        >>> clear_brackets("report[final](v2){x}")
        'report'
        >>> clear_brackets("a(b(c)d)")
        'ad)'
    """
    return _BRACKETED_SPAN.sub("", name)


def remove_digits(name: str) -> str:
    return "".join(ch for ch in name if ch not in _ASCII_DIGITS)


def keep_digits(name: str) -> str:
    return "".join(ch for ch in name if ch in _ASCII_DIGITS)


def pad_name(name: str, digits: int) -> str:
    if len(name) < digits:
        return name.rjust(digits, "0")
    return name


def format_number(number: int, digits: int) -> str:
    """Left-pad a decimal number with zeros to at least ``digits`` width."""

    return str(number).zfill(max(digits, 0))


def random_name() -> str:
    return uuid4().hex[:RANDOM_NAME_LENGTH]


def normalize_extension(text: str) -> str:
    return text[1:] if text.startswith(".") else text


def _text(value: str | None) -> str:
    return value if value is not None else ""


def _digits(params: RenameParams, default: int = 1) -> int:
    if params.digits is None:
        return default
    return max(params.digits, 0)


def _start(params: RenameParams) -> int:
    return params.start if params.start is not None else 1


_RULES: dict[RuleKind, _RuleFn] = {
    RuleKind.CLEAR_NAME: lambda name, ext, index, params: ("", ext),
    RuleKind.REPLACE: lambda name, ext, index, params: (
        replace_literal(name, _text(params.search), _text(params.replace)),
        ext,
    ),
    RuleKind.PREFIX: lambda name, ext, index, params: (_text(params.text) + name, ext),
    RuleKind.SUFFIX: lambda name, ext, index, params: (name + _text(params.text), ext),
    RuleKind.CLEAR_BRACKETS: lambda name, ext, index, params: (clear_brackets(name), ext),
    RuleKind.REMOVE_NUMBERS: lambda name, ext, index, params: (remove_digits(name), ext),
    RuleKind.NUMBERS_ONLY: lambda name, ext, index, params: (keep_digits(name), ext),
    RuleKind.PADDING: lambda name, ext, index, params: (pad_name(name, _digits(params)), ext),
    RuleKind.NUMBERING: lambda name, ext, index, params: (
        name + format_number(_start(params) + index, _digits(params)),
        ext,
    ),
    RuleKind.RANDOM: lambda name, ext, index, params: (random_name(), ext),
    RuleKind.EXT_DELETE: lambda name, ext, index, params: (name, ""),
    RuleKind.EXT_ADD: lambda name, ext, index, params: (
        name,
        normalize_extension(_text(params.text)),
    ),
    RuleKind.EXT_CHANGE: lambda name, ext, index, params: (
        name,
        normalize_extension(_text(params.text)),
    ),
}

_missing = set(RuleKind) - set(_RULES) - UNMAPPED_RULES
if _missing:
    raise RuntimeError(f"Rules without a transformation: {sorted(kind.value for kind in _missing)}")
