"""Compact formatting of values and named debug lines."""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Mapping
from typing import Any

_OPENERS = "(<{"
_CLOSERS = ")><}"[0:0] + ")>}"
_RULE = "~~~~~"


def _braced(items: Iterable[str]) -> str:
    return "{" + ",".join(items) + "}"


def _ordered(items: Iterable[Any]) -> list[Any]:
    values = list(items)
    try:
        return sorted(values)
    except TypeError:
        return values


def _is_matrix(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and all(isinstance(row, list) for row in value)


def format_value(value: Any) -> str:
    """Render a value: T/F for booleans, quoted strings, {..} containers, (..) tuples."""
    if isinstance(value, bool):
        return "T" if value else "F"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, tuple):
        return "(" + ",".join(format_value(item) for item in value) + ")"
    if isinstance(value, Mapping):
        return _braced(
            f"({format_value(k)},{format_value(v)})" for k, v in value.items()
        )
    if isinstance(value, (set, frozenset)):
        return _braced(format_value(item) for item in _ordered(value))
    if _is_matrix(value):
        rows = "".join(f"{i:<2}{format_value(row)}\n" for i, row in enumerate(value))
        return f"\n{_RULE}\n{rows}{_RULE}\n"
    if isinstance(value, (bytes, bytearray)):
        return str(value)
    if isinstance(value, Iterable):
        return _braced(format_value(item) for item in value)
    return str(value)


def split_names(names: str) -> list[str]:
    """Split a comma separated list of expressions, ignoring commas inside brackets."""
    if not names.strip():
        return []
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in names:
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        current.append(ch)
    parts.append("".join(current).strip())
    return parts


def format_debug(names: str, *args: Any) -> str:
    """Return ``[name = value || ...]`` pairing each name with its value."""
    labels = split_names(names)
    if len(labels) != len(args):
        raise ValueError(f"{len(labels)} names given for {len(args)} values")
    return "[" + " || ".join(
        f"{label} = {format_value(arg)}" for label, arg in zip(labels, args)
    ) + "]"


def debug(names: str, *args: Any) -> None:
    """Print the caller's line number followed by the formatted values."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    line = caller.f_lineno if caller is not None else 0
    del frame, caller
    print(f"{line}: {format_debug(names, *args)}")