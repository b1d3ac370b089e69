"""Custom exceptions raised while auditing locale health."""

from __future__ import annotations

from pathlib import Path
from typing import Union


class LocaleHealthError(Exception):
    """Base class for expected failures of a locale health check."""


class StructuredFileError(LocaleHealthError):
    """Raised when a CSON/JSON document cannot be parsed."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class DuplicateKeyError(StructuredFileError):
    """Raised by a strict parse when a mapping repeats one of its keys."""

    def __init__(self, path: Union[str, Path], key: str) -> None:
        self.key = key
        super().__init__(path, f"Duplicate key '{key}'")


class LocaleValueError(LocaleHealthError):
    """Raised when a locale document holds something other than strings and mappings."""

    def __init__(self, key_path: str, value_type: str) -> None:
        self.key_path = key_path
        self.value_type = value_type
        super().__init__(
            f"The keypath '{key_path}' holds a {value_type} value; "
            "locale values must be strings or nested mappings"
        )
