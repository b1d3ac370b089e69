"""Per-package audit records and the scan-wide result set."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List

from .json_types import JsonDict, get_str

LocaleDocument = Dict[str, object]


@dataclass(slots=True)
class PackageRecord:
    """Everything collected about one package during a scan."""

    name: str
    directory: str
    manifest: JsonDict = field(default_factory=dict)
    menus: Dict[str, object] = field(default_factory=dict)
    locale_files: Dict[str, LocaleDocument] = field(default_factory=dict)
    has_dups: bool = False
    has_en_locale: bool = False
    errs: List[str] = field(default_factory=list)
    used_key_paths: Dict[str, int] = field(default_factory=dict)
    total_key_paths: int = 0

    @property
    def manifest_name(self) -> str:
        return get_str(self.manifest, "name") or self.name

    @property
    def has_errors(self) -> bool:
        return bool(self.errs)

    def add_error(self, message: str) -> None:
        self.errs.append(message)

    def register_locale(self, locale: str, document: LocaleDocument) -> None:
        self.locale_files[locale] = document

    def record_usage(self, key_path: str) -> None:
        self.used_key_paths[key_path] = self.used_key_paths.get(key_path, 0) + 1


@dataclass(slots=True)
class ScanResults:
    packages: Dict[str, PackageRecord] = field(default_factory=dict)
    commons_key_maps_used: Dict[str, int] = field(default_factory=dict)

    def record_commons_usage(self, key_path: str) -> None:
        self.commons_key_maps_used[key_path] = (
            self.commons_key_maps_used.get(key_path, 0) + 1
        )


class PackageStore:
    """Keyed view over :class:`ScanResults` packages with upsert semantics.

    ``upsert`` never replaces an existing record: later locale files for the same
    package accumulate into the record created by the first one.
    """

    def __init__(self, results: ScanResults) -> None:
        self._packages = results.packages

    def upsert(self, name: str, factory: Callable[[], PackageRecord]) -> PackageRecord:
        record = self._packages.get(name)
        if record is None:
            record = factory()
            self._packages[name] = record
        return record


__all__ = ["LocaleDocument", "PackageRecord", "PackageStore", "ScanResults"]
