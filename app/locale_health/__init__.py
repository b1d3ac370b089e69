"""Locale health checker package."""

from .app import create_health_check, run_health_check  # noqa: F401
from .health_check import HealthCheck  # noqa: F401
from .models import PackageRecord, ScanResults  # noqa: F401

__all__ = [
    "create_health_check",
    "run_health_check",
    "HealthCheck",
    "PackageRecord",
    "ScanResults",
]
