from __future__ import annotations

from pathlib import Path

from locale_health.utils import match_files
from locale_health.utils.discovery import expand_braces


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{}", encoding="utf-8")


def test_match_files_returns_sorted_relative_paths(tmp_path: Path) -> None:
    _touch(tmp_path / "packages" / "b" / "locales" / "b.en.cson")
    _touch(tmp_path / "packages" / "a" / "locales" / "a.en.cson")
    _touch(tmp_path / "packages" / "a" / "locales" / "a.fr.cson")

    assert match_files("packages/*/locales/*.cson", tmp_path) == [
        "packages/a/locales/a.en.cson",
        "packages/a/locales/a.fr.cson",
        "packages/b/locales/b.en.cson",
    ]


def test_match_files_skips_ignored_directories(tmp_path: Path) -> None:
    _touch(tmp_path / "pkg" / "locales" / "pkg.en.cson")
    _touch(tmp_path / "node_modules" / "dep" / "locales" / "dep.en.cson")
    _touch(tmp_path / "pkg" / "node_modules" / "x" / "locales" / "x.en.cson")

    assert match_files("**/locales/*.cson", tmp_path) == ["pkg/locales/pkg.en.cson"]


def test_match_files_never_returns_directories(tmp_path: Path) -> None:
    (tmp_path / "pkg" / "locales" / "folder.en.cson").mkdir(parents=True)
    _touch(tmp_path / "pkg" / "locales" / "pkg.en.cson")

    assert match_files("pkg/locales/*", tmp_path) == ["pkg/locales/pkg.en.cson"]


def test_match_files_merges_multiple_patterns(tmp_path: Path) -> None:
    _touch(tmp_path / "pkg" / "locales" / "pkg.en.cson")
    _touch(tmp_path / "pkg" / "locales" / "pkg.en.json")

    matches = match_files(["pkg/locales/*.cson", "pkg/locales/*", " "], tmp_path)

    assert matches == ["pkg/locales/pkg.en.cson", "pkg/locales/pkg.en.json"]


def test_match_files_accepts_absolute_patterns(tmp_path: Path) -> None:
    _touch(tmp_path / "packages" / "a" / "locales" / "a.en.cson")

    pattern = (tmp_path / "packages" / "*" / "locales" / "*.cson").as_posix()

    assert match_files(pattern, tmp_path) == ["packages/a/locales/a.en.cson"]


def test_match_files_expands_brace_alternatives(tmp_path: Path) -> None:
    _touch(tmp_path / "pkg" / "locales" / "pkg.en.cson")
    _touch(tmp_path / "pkg" / "locales" / "pkg.fr.json")
    _touch(tmp_path / "pkg" / "locales" / "pkg.de.yaml")

    assert match_files("pkg/locales/*.{cson,json}", tmp_path) == [
        "pkg/locales/pkg.en.cson",
        "pkg/locales/pkg.fr.json",
    ]


def test_expand_braces_handles_nesting_and_literal_braces() -> None:
    assert expand_braces("a/{b,c{d,e}}/f") == ["a/b/f", "a/cd/f", "a/ce/f"]
    assert expand_braces("x{y}z") == ["x{y}z"]
    assert expand_braces("{unclosed,") == ["{unclosed,"]
