from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

from locale_health.config import ScanEnvironmentConfig

PackageFactory = Callable[..., Path]


@pytest.fixture
def scan_config() -> ScanEnvironmentConfig:
    return ScanEnvironmentConfig(
        default_locale="en",
        commons_namespace="commons",
        manifest_file="package.json",
        menus_dir="menus",
        source_locations=("index.js", "src", "lib"),
        ignore_dirs=("node_modules",),
        log_file=None,
    )


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def make_package(tmp_path: Path) -> PackageFactory:
    """Lay out ``<tmp>/packages/<dir_name>`` with manifest, locales, menus and sources."""

    def _make(
        name: Optional[str] = "pkg",
        *,
        locales: Optional[Dict[str, str]] = None,
        sources: Optional[Dict[str, str]] = None,
        menus: Optional[Dict[str, str]] = None,
        manifest: Optional[Dict[str, Any]] = None,
        dir_name: Optional[str] = None,
        write_manifest: bool = True,
    ) -> Path:
        root = tmp_path / "packages" / (dir_name or name or "anonymous")
        root.mkdir(parents=True, exist_ok=True)
        if write_manifest:
            payload: Dict[str, Any] = dict(manifest or {})
            if name is not None:
                payload.setdefault("name", name)
            _write(root / "package.json", json.dumps(payload))
        for file_name, content in (locales or {}).items():
            _write(root / "locales" / file_name, content)
        for rel_path, content in (sources or {}).items():
            _write(root / rel_path, content)
        for file_name, content in (menus or {}).items():
            _write(root / "menus" / file_name, content)
        return root

    return _make
