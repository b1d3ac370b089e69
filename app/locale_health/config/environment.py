from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Optional, Tuple

_DEFAULTS: Dict[str, str] = {
    "LOCALE_HEALTH_DEFAULT_LOCALE": "en",
    "LOCALE_HEALTH_COMMONS_NAMESPACE": "commons",
    "LOCALE_HEALTH_MANIFEST_FILE": "package.json",
    "LOCALE_HEALTH_MENUS_DIR": "menus",
    "LOCALE_HEALTH_SOURCE_LOCATIONS": "index.js,src,lib",
    "LOCALE_HEALTH_IGNORE_DIRS": "node_modules",
}


@dataclass(frozen=True)
class ScanEnvironmentConfig:
    default_locale: str
    commons_namespace: str
    manifest_file: str
    menus_dir: str
    source_locations: Tuple[str, ...]
    ignore_dirs: Tuple[str, ...]
    log_file: Optional[str]


def _coalesce_env(key: str) -> str:
    default = _DEFAULTS.get(key)
    value = os.getenv(key)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing environment variable '{key}'")
        return default
    trimmed = value.strip()
    if not trimmed:
        if default is not None:
            return default
        raise RuntimeError(f"Environment variable '{key}' cannot be empty")
    return trimmed


def _parse_list(key: str) -> Tuple[str, ...]:
    raw = _coalesce_env(key)
    entries = [entry.strip() for entry in raw.split(",") if entry.strip()]
    if not entries:
        raise RuntimeError(f"Environment variable '{key}' must list at least one entry")
    return tuple(entries)


def _parse_segment(key: str) -> str:
    raw = _coalesce_env(key)
    if "." in raw:
        raise RuntimeError(f"Environment variable '{key}' must be a single key segment")
    return raw


def _parse_optional_path(key: str) -> Optional[str]:
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def build_scan_environment() -> ScanEnvironmentConfig:
    """Read the scan settings from the current process environment."""

    return ScanEnvironmentConfig(
        default_locale=_parse_segment("LOCALE_HEALTH_DEFAULT_LOCALE"),
        commons_namespace=_parse_segment("LOCALE_HEALTH_COMMONS_NAMESPACE"),
        manifest_file=_coalesce_env("LOCALE_HEALTH_MANIFEST_FILE"),
        menus_dir=_coalesce_env("LOCALE_HEALTH_MENUS_DIR"),
        source_locations=_parse_list("LOCALE_HEALTH_SOURCE_LOCATIONS"),
        ignore_dirs=_parse_list("LOCALE_HEALTH_IGNORE_DIRS"),
        log_file=_parse_optional_path("LOCALE_HEALTH_LOG_FILE"),
    )


@lru_cache(maxsize=1)
def get_scan_environment() -> ScanEnvironmentConfig:
    return build_scan_environment()


__all__ = ["ScanEnvironmentConfig", "build_scan_environment", "get_scan_environment"]
