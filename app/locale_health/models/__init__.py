"""Typed records shared by the scanner, the reconciliation engine and reports."""

from .json_types import JSONValue, JsonDict, get_str
from .key_path import (
    CommonsKey,
    KeyPathUsage,
    KeyReference,
    LocalKey,
    classify_key_path,
    strip_package_segment,
)
from .package import LocaleDocument, PackageRecord, PackageStore, ScanResults

__all__ = [
    "JSONValue",
    "JsonDict",
    "get_str",
    "CommonsKey",
    "KeyPathUsage",
    "KeyReference",
    "LocalKey",
    "classify_key_path",
    "strip_package_segment",
    "LocaleDocument",
    "PackageRecord",
    "PackageStore",
    "ScanResults",
]
