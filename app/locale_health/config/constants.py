from __future__ import annotations

import re
from enum import Enum
from typing import Final, Pattern

# ---------------------------------------------------------------------------
# Package resolution
# ---------------------------------------------------------------------------
UNKNOWN_PACKAGE_ID: Final[str] = "UNKNOWN-PACKAGE"
# Locale files live two levels below the package root: <pkg>/locales/<file>
PACKAGE_ROOT_DEPTH: Final[int] = 2

# ---------------------------------------------------------------------------
# Usage extraction rules
# ---------------------------------------------------------------------------
AUTO_TRANSLATE_LABEL: Final[Pattern[str]] = re.compile(r"^%.+%$")
ATOM_I18N_CALL: Final[Pattern[str]] = re.compile(
    r"""atom\.i18n\.t\(['"](?P<key_path>.+?)['"](,(?P<args>.+?))?\)""",
    re.MULTILINE,
)

CONFIG_SCHEMA_KEY: Final[str] = "configSchema"
MENU_KEY: Final[str] = "menu"
SUBMENU_KEY: Final[str] = "submenu"
CONTEXT_MENU_KEY: Final[str] = "context-menu"
LABEL_KEY: Final[str] = "label"


class ArtifactKind(str, Enum):
    SOURCE = "source"
    MENU = "menu"
    CONTEXT_MENU = "context-menu"
    CONFIG = "config"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)


# ---------------------------------------------------------------------------
# Finding messages
# ---------------------------------------------------------------------------
MISSING_DEFAULT_LOCALE_MESSAGE: Final[str] = (
    "This package has no default '{locale}' locale, "
    "it MUST require one before all checks can run!"
)
MISSING_KEY_PATH_MESSAGE: Final[str] = (
    "The keypath '{key_path}' found in '{package}' "
    "does NOT exist in the default locale file!"
)
UNUSED_KEY_PATH_MESSAGE: Final[str] = (
    "The keypath '{key_path}' is present in the locale file but never used."
)
DUPLICATE_KEYS_MESSAGE: Final[str] = "Duplicate keys found in {file}!"
UNPARSABLE_LOCALE_MESSAGE: Final[str] = "Unable to parse locale file {file}: {reason}"
UNRESOLVED_PACKAGE_MESSAGE: Final[str] = (
    "Unable to locate full package details for path: '{file}', Skipping..."
)
