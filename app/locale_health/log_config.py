"""Logging helpers for the locale health checker."""

from __future__ import annotations

import os
import sys
from typing import Any

from .config import get_scan_environment
from .utils.helpers import now_iso


def _read_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    return normalized in {"1", "true", "yes", "on"}


DEBUG = _read_flag("LOCALE_HEALTH_DEBUG", False)
VERBOSE = _read_flag("LOCALE_HEALTH_VERBOSE", False)


LOG_FILE = get_scan_environment().log_file


def _emit(prefix: str, label: str, payload: Any) -> None:
    timestamp = now_iso()
    message = f"[{prefix}][{timestamp}] {label}: {payload}"
    _append_log(message)


def _append_log(message: str) -> None:
    stream = sys.stderr
    encoding = getattr(stream, "encoding", None) or "utf-8"
    safe_message = message.encode(encoding, errors="replace").decode(encoding)
    stream.write(f"{safe_message}\n")
    stream.flush()
    if LOG_FILE is None:
        return
    directory = os.path.dirname(LOG_FILE)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(LOG_FILE, "a", encoding="utf-8") as log_file:
        log_file.write(f"{message}\n")


def verbose_log(label: str, payload: Any) -> None:
    """Emit structured logs when verbose mode is enabled."""
    if not VERBOSE:
        return
    _emit("VERBOSE", label, payload)


def debug_verbose(label: str, payload: Any) -> None:
    """Emit debug logs when debug mode is active, or always in verbose mode."""
    if not (DEBUG or VERBOSE):
        return
    _emit("DEBUG", label, payload)


def warning_log(label: str, payload: Any) -> None:
    """Emit a warning regardless of the verbosity flags."""
    _emit("WARNING", label, payload)


def error_log(label: str, payload: Any) -> None:
    _emit("ERROR", label, payload)


__all__ = [
    "DEBUG",
    "VERBOSE",
    "verbose_log",
    "debug_verbose",
    "warning_log",
    "error_log",
]
