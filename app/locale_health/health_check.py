"""Scan driver: discovers locale files and audits the packages owning them."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .config import (
    DUPLICATE_KEYS_MESSAGE,
    UNKNOWN_PACKAGE_ID,
    UNPARSABLE_LOCALE_MESSAGE,
    UNRESOLVED_PACKAGE_MESSAGE,
    ScanEnvironmentConfig,
    get_scan_environment,
)
from .core import PackageResolver, ReconciliationEngine, UsageExtractor, locale_from_path
from .exceptions import DuplicateKeyError, StructuredFileError
from .log_config import debug_verbose, verbose_log, warning_log
from .models import PackageRecord, PackageStore, ScanResults
from .schemas import ScanReportSchema
from .utils import match_files, parse_structured_file


class HealthCheck:
    """Audits every package reachable from ``patterns`` under ``cwd``.

    Packages are reconciled again after each of their locale files is loaded,
    so a package with several locale files accumulates errors and usage counts
    across passes.
    """

    def __init__(
        self,
        cwd: Union[str, Path],
        patterns: Union[str, Sequence[str]],
        *,
        config: Optional[ScanEnvironmentConfig] = None,
        extractor: Optional[UsageExtractor] = None,
    ) -> None:
        self.cwd = Path(cwd)
        self.patterns: List[str] = [patterns] if isinstance(patterns, str) else list(patterns)
        self.config = config or get_scan_environment()
        self.results = ScanResults()
        self.log_results = False
        self._store = PackageStore(self.results)
        self._resolver = PackageResolver(self.cwd, self.config)
        self._engine = ReconciliationEngine(self.results, self.config, extractor)

    async def discover(self) -> List[str]:
        return await asyncio.to_thread(
            match_files, self.patterns, self.cwd, self.config.ignore_dirs
        )

    async def scan(self) -> ScanResults:
        locale_files = await self.discover()
        verbose_log("scan_started", {"cwd": str(self.cwd), "files": len(locale_files)})

        for file in locale_files:
            self.process_locale_file(file)

        if self.log_results:
            verbose_log("scan_results", ScanReportSchema().dump(self.results))
        return self.results

    def process_locale_file(self, file: str) -> Optional[PackageRecord]:
        package_name = self._resolver.find_package_name(file)
        if package_name == UNKNOWN_PACKAGE_ID:
            warning_log("package_unresolved", UNRESOLVED_PACKAGE_MESSAGE.format(file=file))
            return None

        has_dups = self.does_locale_have_dups(file)
        pack = self._store.upsert(
            package_name,
            lambda: PackageRecord(
                name=package_name,
                directory=str(self._resolver.package_dir(file)),
                manifest=self._resolver.find_manifest(file),
                menus=self._resolver.find_menus(file),
            ),
        )

        if has_dups:
            pack.has_dups = True
            pack.add_error(DUPLICATE_KEYS_MESSAGE.format(file=file))

        try:
            document = parse_structured_file(self.cwd / file)
        except StructuredFileError as exc:
            pack.add_error(UNPARSABLE_LOCALE_MESSAGE.format(file=file, reason=exc.reason))
        else:
            if not isinstance(document, dict):
                pack.add_error(
                    UNPARSABLE_LOCALE_MESSAGE.format(
                        file=file, reason="top level value is not a mapping"
                    )
                )
            else:
                pack.register_locale(locale_from_path(file), document)

        debug_verbose("locale_file_processed", {"package": package_name, "file": file})
        self._engine.check_package(pack)
        return pack

    def does_locale_have_dups(self, file: str) -> bool:
        try:
            parse_structured_file(self.cwd / file, allow_duplicate_keys=False)
        except DuplicateKeyError as exc:
            warning_log("duplicate_keys", {"file": file, "key": exc.key})
            return True
        except StructuredFileError as exc:
            warning_log("duplicate_check_failed", {"file": file, "error": exc.reason})
            return False
        return False


__all__ = ["HealthCheck"]
