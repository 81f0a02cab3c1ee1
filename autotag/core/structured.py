"""Helpers for safely reading untyped JSON payloads.

GitHub API responses and the Actions event payload arrive as plain JSON.
These helpers validate shapes at runtime and narrow types for the checker.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]
ObjList = list[object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def as_obj_list(obj: object) -> ObjList | None:
    if isinstance(obj, list):
        return cast(ObjList, obj)
    return None


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_raw_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value exactly as stored (commit messages keep their text)."""
    value = table.get(key)
    if not isinstance(value, str):
        return None
    return value


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    return as_str_dict(table.get(key))


def get_list(table: Mapping[str, object], key: str) -> ObjList | None:
    return as_obj_list(table.get(key))


def get_path_str(table: Mapping[str, object], *keys: str) -> str | None:
    """Follow nested tables and return the final string value.

    Example:
        get_path_str(payload, "repository", "owner", "login")
    """
    if not keys:
        return None
    current: Mapping[str, object] | None = table
    for key in keys[:-1]:
        if current is None:
            return None
        current = get_table(current, key)
    if current is None:
        return None
    return get_str(current, keys[-1])
