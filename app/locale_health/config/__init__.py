"""Configuration surface for the locale health checker."""

from .constants import (
    ATOM_I18N_CALL,
    AUTO_TRANSLATE_LABEL,
    CONFIG_SCHEMA_KEY,
    CONTEXT_MENU_KEY,
    DUPLICATE_KEYS_MESSAGE,
    LABEL_KEY,
    MENU_KEY,
    MISSING_DEFAULT_LOCALE_MESSAGE,
    MISSING_KEY_PATH_MESSAGE,
    PACKAGE_ROOT_DEPTH,
    SUBMENU_KEY,
    UNKNOWN_PACKAGE_ID,
    UNPARSABLE_LOCALE_MESSAGE,
    UNRESOLVED_PACKAGE_MESSAGE,
    UNUSED_KEY_PATH_MESSAGE,
    ArtifactKind,
)
from .environment import (
    ScanEnvironmentConfig,
    build_scan_environment,
    get_scan_environment,
)

__all__ = [
    "ATOM_I18N_CALL",
    "AUTO_TRANSLATE_LABEL",
    "CONFIG_SCHEMA_KEY",
    "CONTEXT_MENU_KEY",
    "DUPLICATE_KEYS_MESSAGE",
    "LABEL_KEY",
    "MENU_KEY",
    "MISSING_DEFAULT_LOCALE_MESSAGE",
    "MISSING_KEY_PATH_MESSAGE",
    "PACKAGE_ROOT_DEPTH",
    "SUBMENU_KEY",
    "UNKNOWN_PACKAGE_ID",
    "UNPARSABLE_LOCALE_MESSAGE",
    "UNRESOLVED_PACKAGE_MESSAGE",
    "UNUSED_KEY_PATH_MESSAGE",
    "ArtifactKind",
    "ScanEnvironmentConfig",
    "build_scan_environment",
    "get_scan_environment",
]
