"""Key path references classified into the package or the shared namespace."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..config import ArtifactKind


@dataclass(frozen=True, slots=True)
class LocalKey:
    """A reference resolved against the package's own default locale."""

    raw: str
    stripped: str


@dataclass(frozen=True, slots=True)
class CommonsKey:
    """A reference into the cross-package namespace, defined by the host editor."""

    raw: str
    stripped: str


KeyReference = Union[LocalKey, CommonsKey]


@dataclass(frozen=True, slots=True)
class KeyPathUsage:
    """A single occurrence of a key path found in a package artifact."""

    key_path: str
    kind: ArtifactKind
    origin: str


def strip_package_segment(key_path: str) -> str:
    """Drop the leading segment (the package name used by application code)."""

    _, _, remainder = key_path.partition(".")
    return remainder


def classify_key_path(key_path: str, commons_namespace: str = "commons") -> KeyReference:
    stripped = strip_package_segment(key_path)
    if stripped.split(".", 1)[0] == commons_namespace:
        return CommonsKey(raw=key_path, stripped=stripped)
    return LocalKey(raw=key_path, stripped=stripped)


__all__ = [
    "CommonsKey",
    "KeyPathUsage",
    "KeyReference",
    "LocalKey",
    "classify_key_path",
    "strip_package_segment",
]
