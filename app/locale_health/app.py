"""Application bootstrap for the locale health checker."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional, Union

from .config import ScanEnvironmentConfig
from .health_check import HealthCheck
from .models import ScanResults


def create_health_check(
    cwd: Union[str, Path],
    patterns: Union[str, List[str]],
    *,
    config: Optional[ScanEnvironmentConfig] = None,
    log_results: bool = False,
) -> HealthCheck:
    pattern_list = [patterns] if isinstance(patterns, str) else list(patterns)
    sanitized = [pattern.strip() for pattern in pattern_list if pattern.strip()]
    if not sanitized:
        raise ValueError("At least one glob pattern is required")
    health_check = HealthCheck(cwd, sanitized, config=config)
    health_check.log_results = log_results
    return health_check


def run_health_check(
    cwd: Union[str, Path],
    patterns: Union[str, List[str]],
    *,
    config: Optional[ScanEnvironmentConfig] = None,
) -> ScanResults:
    """Convenience wrapper running a full scan to completion."""
    health_check = create_health_check(cwd, patterns, config=config)
    return asyncio.run(health_check.scan())


__all__ = ["create_health_check", "run_health_check"]
