"""Reconciles key path usages with a package's default locale.

A package is checked in two stages. Without a default locale nothing can be
verified and a single terminal error is recorded. Otherwise every artifact
kind (menus, context menus, config schema, source) is walked and each usage is
validated against the default locale; once all usages are tallied, key paths
that were never referenced are reported.

Findings are appended to ``PackageRecord.errs``; they never raise. Checks can
be re-run on the same record: errors and usage counts accumulate.
"""

from __future__ import annotations

import traceback
from typing import Iterable, Optional

from ..config import (
    MISSING_DEFAULT_LOCALE_MESSAGE,
    MISSING_KEY_PATH_MESSAGE,
    UNUSED_KEY_PATH_MESSAGE,
    ScanEnvironmentConfig,
)
from ..exceptions import LocaleHealthError
from ..log_config import debug_verbose, error_log
from ..models import CommonsKey, KeyPathUsage, PackageRecord, ScanResults, classify_key_path
from .key_paths import get_value_at_key_path, index_key_paths
from .usage import (
    RegexUsageExtractor,
    UsageExtractor,
    collect_source_corpus,
    iter_config_usages,
    iter_context_menu_usages,
    iter_menu_usages,
)


class ReconciliationEngine:
    def __init__(
        self,
        results: ScanResults,
        config: ScanEnvironmentConfig,
        extractor: Optional[UsageExtractor] = None,
    ) -> None:
        self._results = results
        self._config = config
        self._extractor: UsageExtractor = extractor or RegexUsageExtractor()

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def check_package(self, pack: PackageRecord) -> None:
        """Run every check for ``pack``; unexpected failures stay contained."""

        try:
            self.does_package_have_default_locale(pack)
            if not pack.has_en_locale:
                pack.add_error(
                    MISSING_DEFAULT_LOCALE_MESSAGE.format(locale=self._config.default_locale)
                )
                return
            self.does_package_have_stray_menus(pack)
            self.does_package_have_stray_context_menus(pack)
            self.does_package_have_stray_configs(pack)
            self.does_package_have_stray_source_strings(pack)
            # Needs every usage tallied first.
            self.find_unused_locale_strings(pack)
        except LocaleHealthError as exc:
            pack.add_error(str(exc))
            error_log("package_check_failed", {"package": pack.name, "error": str(exc)})
        except Exception as exc:  # noqa: BLE001 - one bad package must not stop the scan
            error_log(
                "package_check_crashed",
                {
                    "package": pack.name,
                    "error": repr(exc),
                    "traceback": traceback.format_exc(),
                },
            )

    # ------------------------------------------------------------------
    # Individual checks
    # ------------------------------------------------------------------
    def does_package_have_default_locale(self, pack: PackageRecord) -> bool:
        if self._config.default_locale in pack.locale_files:
            pack.has_en_locale = True
        return pack.has_en_locale

    def does_package_have_stray_menus(self, pack: PackageRecord) -> None:
        self._validate_usages(iter_menu_usages(pack.menus), pack)

    def does_package_have_stray_context_menus(self, pack: PackageRecord) -> None:
        self._validate_usages(iter_context_menu_usages(pack.menus), pack)

    def does_package_have_stray_configs(self, pack: PackageRecord) -> None:
        self._validate_usages(
            iter_config_usages(pack.manifest, origin=self._config.manifest_file), pack
        )

    def does_package_have_stray_source_strings(self, pack: PackageRecord) -> None:
        corpus = collect_source_corpus(pack.directory, self._config.source_locations)
        debug_verbose("source_corpus", {"package": pack.name, "files": len(corpus)})
        self._validate_usages(self._extractor.extract(corpus), pack)

    def find_unused_locale_strings(self, pack: PackageRecord) -> None:
        default_locale = pack.locale_files[self._config.default_locale]
        key_paths = index_key_paths(default_locale)
        pack.total_key_paths = len(key_paths)

        prefix = pack.manifest_name
        for key_path in key_paths:
            # Source code usually references the key with the package name in front.
            if pack.used_key_paths.get(key_path) or pack.used_key_paths.get(
                f"{prefix}.{key_path}"
            ):
                continue
            pack.add_error(UNUSED_KEY_PATH_MESSAGE.format(key_path=key_path))

    # ------------------------------------------------------------------
    # Usage validation
    # ------------------------------------------------------------------
    def check_locale_string_validity(self, key_path: str, pack: PackageRecord) -> None:
        reference = classify_key_path(key_path, self._config.commons_namespace)
        if isinstance(reference, CommonsKey):
            # Defined by the editor, not by the package.
            self._results.record_commons_usage(reference.stripped)
            return

        default_locale = pack.locale_files[self._config.default_locale]
        if get_value_at_key_path(default_locale, reference.stripped) is None:
            pack.add_error(
                MISSING_KEY_PATH_MESSAGE.format(
                    key_path=reference.raw, package=pack.manifest_name
                )
            )
            return
        pack.record_usage(reference.raw)

    def _validate_usages(self, usages: Iterable[KeyPathUsage], pack: PackageRecord) -> None:
        for usage in usages:
            debug_verbose(
                "key_path_usage",
                {
                    "package": pack.name,
                    "key_path": usage.key_path,
                    "kind": str(usage.kind),
                    "origin": usage.origin,
                },
            )
            self.check_locale_string_validity(usage.key_path, pack)


__all__ = ["ReconciliationEngine"]
