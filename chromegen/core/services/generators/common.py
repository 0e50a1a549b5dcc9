"""
Shared helpers for the generators — ordering, run-at values, encoding.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any, TypeVar

RUN_AT_DOCUMENT_START = "document_start"
RUN_AT_DOCUMENT_END = "document_end"
RUN_AT_DOCUMENT_IDLE = "document_idle"

_RUN_AT_VALUES = frozenset({
    RUN_AT_DOCUMENT_START,
    RUN_AT_DOCUMENT_END,
    RUN_AT_DOCUMENT_IDLE,
})

_HEADER = "Generated by chromegen at build time. Do not edit by hand."

T = TypeVar("T")


class SerializationError(Exception):
    """Raised when contribution data cannot be encoded."""


def normalize_run_at(run_at: str) -> str:
    """Map a run-at value onto one Chrome accepts.

    Known values pass through; anything else (including "") becomes
    ``document_idle``.
    """
    if run_at in _RUN_AT_VALUES:
        return run_at
    return RUN_AT_DOCUMENT_IDLE


def by_priority(records: Iterable[T]) -> list[T]:
    """Sort records by ascending ``priority``; equal priorities keep their order."""
    return sorted(records, key=lambda r: r.priority)  # type: ignore[attr-defined]


def encode_json(data: Any, *, sort_keys: bool = False) -> str:
    """Encode data as indented JSON with a trailing newline."""
    try:
        return json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys) + "\n"
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


def ts_module(doc_lines: list[str], body: list[str]) -> str:
    """Assemble a TypeScript module: doc comment, blank line, body."""
    lines = ["/**"]
    lines.extend(f" * {line}" if line else " *" for line in doc_lines)
    lines.append(f" * {_HEADER}")
    lines.append(" */")
    lines.append("")
    lines.extend(body)
    return "\n".join(lines).rstrip("\n") + "\n"


def ts_const(name: str, type_name: str, value: Any, *, suffix: str = "") -> str:
    """Render ``export const name: Type = <json>`` for a JSON-compatible value."""
    literal = encode_json(value).rstrip("\n")
    annotation = f": {type_name}" if type_name else ""
    return f"export const {name}{annotation} = {literal}{suffix}"
