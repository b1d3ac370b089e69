"""Shared JSON-compatible type aliases and helpers."""

from __future__ import annotations

from typing import Mapping, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]
JsonDict: TypeAlias = dict[str, JSONValue]


def get_str(mapping: Mapping[str, JSONValue], key: str) -> str | None:
    value = mapping.get(key)
    return value if isinstance(value, str) else None
