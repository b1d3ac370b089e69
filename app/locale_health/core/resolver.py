from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Union

from ..config import PACKAGE_ROOT_DEPTH, UNKNOWN_PACKAGE_ID, ScanEnvironmentConfig
from ..exceptions import StructuredFileError
from ..log_config import debug_verbose, warning_log
from ..models import JsonDict, get_str
from ..utils import parse_structured_file


def locale_from_path(file: Union[str, Path]) -> str:
    """``strings.en.cson`` -> ``en``; names without a dot -> ``""``."""

    segments = Path(file).name.split(".")
    if len(segments) < 2:
        return ""
    return segments[-2]


class PackageResolver:
    """Locates the package that owns a locale file.

    Locale files are expected at ``<package>/<locales dir>/<file>``; the
    manifest and the ``menus`` directory sit in ``<package>``.
    """

    def __init__(self, base_dir: Union[str, Path], config: ScanEnvironmentConfig) -> None:
        self._base_dir = Path(base_dir)
        self._config = config

    def package_dir(self, file: Union[str, Path]) -> Path:
        path = self._base_dir / file
        for _ in range(PACKAGE_ROOT_DEPTH):
            path = path.parent
        return path

    def find_manifest(self, file: Union[str, Path]) -> JsonDict:
        manifest_path = self.package_dir(file) / self._config.manifest_file
        if not manifest_path.is_file():
            return {}
        try:
            decoded = json.loads(manifest_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            warning_log(
                "manifest_unreadable",
                {"path": str(manifest_path), "error": repr(exc)},
            )
            return {}
        if not isinstance(decoded, dict):
            warning_log("manifest_not_object", {"path": str(manifest_path)})
            return {}
        return decoded

    def find_package_name(self, file: Union[str, Path]) -> str:
        return get_str(self.find_manifest(file), "name") or UNKNOWN_PACKAGE_ID

    def find_menus(self, file: Union[str, Path]) -> Dict[str, object]:
        menu_dir = self.package_dir(file) / self._config.menus_dir
        if not menu_dir.is_dir():
            return {}
        menus: Dict[str, object] = {}
        for menu_file in sorted(menu_dir.iterdir()):
            if not menu_file.is_file():
                continue
            try:
                menus[menu_file.name] = parse_structured_file(menu_file)
            except StructuredFileError as exc:
                warning_log("menu_file_unreadable", {"path": str(menu_file), "error": exc.reason})
        debug_verbose("menus_loaded", {"dir": str(menu_dir), "files": list(menus)})
        return menus


__all__ = ["PackageResolver", "locale_from_path"]
