"""Lookup helpers for parsed TOML documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from cppmconf.strutil import split


def find_recursive(value: Mapping[str, Any], key: str) -> Any:
    """Follow a dotted ``key`` such as ``"a.b.c"`` through nested tables.

    Raises KeyError when a part is missing and TypeError when a part
    before the last is not a table.
    """
    current: Any = value
    for part in split(key, "."):
        if not isinstance(current, Mapping):
            raise TypeError(f"cannot look up {part!r}: value is not a table")
        if part not in current:
            raise KeyError(part)
        current = current[part]
    return current