from __future__ import annotations

import re
from pathlib import Path

import pytest

from locale_health.config import ArtifactKind
from locale_health.core import (
    RegexUsageExtractor,
    collect_source_corpus,
    is_auto_translate_label,
    iter_config_usages,
    iter_context_menu_usages,
    iter_menu_usages,
    key_path_from_label,
)


def test_regex_extractor_captures_first_quoted_argument() -> None:
    corpus = {
        "lib/main.js": (
            "const a = atom.i18n.t('pkg.a.b');\n"
            'const b = atom.i18n.t("pkg.c", { count: 2 });\n'
            "const c = atom.i18n.t('pkg.a.b'), d = atom.i18n.t('pkg.d');\n"
        )
    }

    usages = list(RegexUsageExtractor().extract(corpus))

    assert [usage.key_path for usage in usages] == ["pkg.a.b", "pkg.c", "pkg.a.b", "pkg.d"]
    assert {usage.kind for usage in usages} == {ArtifactKind.SOURCE}
    assert {usage.origin for usage in usages} == {"lib/main.js"}


def test_regex_extractor_ignores_other_calls() -> None:
    corpus = {"index.js": "i18n.t('pkg.a')\natom.i18n.translate('pkg.b')\n"}

    assert list(RegexUsageExtractor().extract(corpus)) == []


def test_regex_extractor_requires_key_path_group() -> None:
    with pytest.raises(ValueError):
        RegexUsageExtractor(re.compile(r"t\('(.+?)'\)"))


def test_regex_extractor_accepts_custom_rule() -> None:
    extractor = RegexUsageExtractor(re.compile(r"_\('(?P<key_path>[^']+)'\)"))

    usages = list(extractor.extract({"a.py": "_('pkg.x') + _('pkg.y')"}))

    assert [usage.key_path for usage in usages] == ["pkg.x", "pkg.y"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("%pkg.menu.open%", True),
        ("%x%", True),
        ("pkg.menu.open", False),
        ("%pkg.menu.open", False),
        ("pkg.menu.open%", False),
        ("%%", False),
        (None, False),
        (42, False),
    ],
)
def test_is_auto_translate_label(value: object, expected: bool) -> None:
    assert is_auto_translate_label(value) is expected


def test_label_unwraps_to_the_key_path_used_in_code() -> None:
    label_key = key_path_from_label("%pkg.menu.open%")
    code_usages = list(
        RegexUsageExtractor().extract({"src/a.js": "atom.i18n.t('pkg.menu.open')"})
    )

    assert label_key == "pkg.menu.open"
    assert code_usages[0].key_path == label_key


def test_iter_config_usages_reads_titles_descriptions_and_enum_options() -> None:
    manifest = {
        "name": "pkg",
        "configSchema": {
            "fontSize": {
                "title": "%pkg.config.fontSize.title%",
                "description": "%pkg.config.fontSize.description%",
                "type": "integer",
            },
            "mode": {
                "title": "Plain title",
                "enum": [
                    {"value": "a", "description": "%pkg.config.mode.a%"},
                    {"value": "b", "description": "Not translated"},
                    "c",
                ],
            },
            "broken": "not a mapping",
        },
    }

    usages = list(iter_config_usages(manifest))

    assert [usage.key_path for usage in usages] == [
        "pkg.config.fontSize.title",
        "pkg.config.fontSize.description",
        "pkg.config.mode.a",
    ]
    assert {usage.kind for usage in usages} == {ArtifactKind.CONFIG}
    assert usages[0].origin == "package.json#configSchema.fontSize"


def test_iter_config_usages_without_schema() -> None:
    assert list(iter_config_usages({"name": "pkg"})) == []
    assert list(iter_config_usages({"configSchema": []})) == []


def test_iter_menu_usages_recurses_through_submenus() -> None:
    menus = {
        "pkg.cson": {
            "menu": [
                {
                    "label": "%pkg.menu.packages%",
                    "submenu": [
                        {
                            "label": "%pkg.menu.root%",
                            "submenu": [{"label": "%pkg.menu.toggle%"}, {"label": "Raw"}],
                        }
                    ],
                }
            ]
        },
        "other.cson": {"menu": {"label": "%ignored%"}},
        "empty.cson": {},
    }

    usages = list(iter_menu_usages(menus))

    assert [usage.key_path for usage in usages] == [
        "pkg.menu.packages",
        "pkg.menu.root",
        "pkg.menu.toggle",
    ]
    assert {usage.origin for usage in usages} == {"pkg.cson"}


def test_iter_context_menu_usages_walks_each_selector_group() -> None:
    menus = {
        "pkg.cson": {
            "context-menu": {
                "atom-text-editor": [
                    {"label": "%pkg.context.copy%", "command": "pkg:copy"},
                    {"type": "separator"},
                ],
                ".tree-view": [{"label": "%pkg.context.reveal%"}],
            }
        }
    }

    usages = list(iter_context_menu_usages(menus))

    assert [usage.key_path for usage in usages] == [
        "pkg.context.copy",
        "pkg.context.reveal",
    ]
    assert usages[1].origin == "pkg.cson#.tree-view"
    assert {usage.kind for usage in usages} == {ArtifactKind.CONTEXT_MENU}


def test_collect_source_corpus_reads_whitelisted_locations_only(tmp_path: Path) -> None:
    (tmp_path / "lib" / "nested").mkdir(parents=True)
    (tmp_path / "src").mkdir()
    (tmp_path / "spec").mkdir()
    (tmp_path / "index.js").write_text("atom.i18n.t('pkg.index')", encoding="utf-8")
    (tmp_path / "lib" / "nested" / "deep.js").write_text("deep", encoding="utf-8")
    (tmp_path / "src" / "view.ts").write_text("view", encoding="utf-8")
    (tmp_path / "spec" / "main-spec.js").write_text("spec", encoding="utf-8")
    (tmp_path / "README.md").write_text("readme", encoding="utf-8")

    corpus = collect_source_corpus(tmp_path, ("index.js", "src", "lib"))

    assert sorted(Path(path).relative_to(tmp_path).as_posix() for path in corpus) == [
        "index.js",
        "lib/nested/deep.js",
        "src/view.ts",
    ]


def test_collect_source_corpus_reads_binary_files_permissively(tmp_path: Path) -> None:
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "icon.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xfe")

    corpus = collect_source_corpus(tmp_path, ("lib",))

    text = corpus[str(tmp_path / "lib" / "icon.png")]
    assert "PNG" in text
    assert "�" in text


def test_collect_source_corpus_of_missing_directory(tmp_path: Path) -> None:
    assert collect_source_corpus(tmp_path / "missing", ("lib",)) == {}


def test_collect_source_corpus_does_not_follow_directory_symlinks(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.js").write_text("atom.i18n.t('pkg.a')", encoding="utf-8")
    (tmp_path / "src" / "loop").symlink_to(tmp_path / "src", target_is_directory=True)
    (tmp_path / "src" / "alias.js").symlink_to(tmp_path / "src" / "main.js")

    corpus = collect_source_corpus(tmp_path, ("src",))

    assert sorted(Path(path).relative_to(tmp_path).as_posix() for path in corpus) == [
        "src/alias.js",
        "src/main.js",
    ]
