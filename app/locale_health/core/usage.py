"""Extraction of translation key path usages from package artifacts.

Source files are scanned textually with a regular expression; menus and the
manifest's config schema are walked as parsed trees looking for auto-translate
labels (``"%some.key.path%"``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Mapping, Pattern, Protocol

from ..config import (
    ATOM_I18N_CALL,
    AUTO_TRANSLATE_LABEL,
    CONFIG_SCHEMA_KEY,
    CONTEXT_MENU_KEY,
    LABEL_KEY,
    MENU_KEY,
    SUBMENU_KEY,
    ArtifactKind,
)
from ..models import KeyPathUsage
from ..utils.helpers import read_text_lenient


class UsageExtractor(Protocol):
    """Pulls key path usages out of a corpus of named text blobs."""

    def extract(self, corpus: Mapping[str, str]) -> Iterator[KeyPathUsage]: ...


class RegexUsageExtractor:
    """Matches a call-expression shape and captures its first quoted argument.

    The pattern must define a ``key_path`` named group. Every match is yielded,
    repeats included, in corpus order.
    """

    def __init__(
        self,
        pattern: Pattern[str] = ATOM_I18N_CALL,
        kind: ArtifactKind = ArtifactKind.SOURCE,
    ) -> None:
        if "key_path" not in pattern.groupindex:
            raise ValueError("Extraction pattern needs a 'key_path' named group")
        self._pattern = pattern
        self._kind = kind

    def extract(self, corpus: Mapping[str, str]) -> Iterator[KeyPathUsage]:
        for origin, text in corpus.items():
            for match in self._pattern.finditer(text):
                yield KeyPathUsage(
                    key_path=match.group("key_path"), kind=self._kind, origin=origin
                )


def is_auto_translate_label(value: Any) -> bool:
    return isinstance(value, str) and AUTO_TRANSLATE_LABEL.fullmatch(value) is not None


def key_path_from_label(value: str) -> str:
    return value.replace("%", "")


def _label_usage(value: Any, kind: ArtifactKind, origin: str) -> Iterator[KeyPathUsage]:
    if is_auto_translate_label(value):
        yield KeyPathUsage(key_path=key_path_from_label(value), kind=kind, origin=origin)


def iter_config_usages(manifest: Mapping[str, Any], origin: str = "package.json") -> Iterator[KeyPathUsage]:
    schema = manifest.get(CONFIG_SCHEMA_KEY)
    if not isinstance(schema, Mapping):
        return
    for name, entry in schema.items():
        if not isinstance(entry, Mapping):
            continue
        entry_origin = f"{origin}#{CONFIG_SCHEMA_KEY}.{name}"
        yield from _label_usage(entry.get("title"), ArtifactKind.CONFIG, entry_origin)
        yield from _label_usage(entry.get("description"), ArtifactKind.CONFIG, entry_origin)
        options = entry.get("enum")
        if not isinstance(options, list):
            continue
        for option in options:
            if isinstance(option, Mapping):
                yield from _label_usage(
                    option.get("description"), ArtifactKind.CONFIG, entry_origin
                )


def _iter_menu_item(item: Any, origin: str) -> Iterator[KeyPathUsage]:
    if not isinstance(item, Mapping):
        return
    yield from _label_usage(item.get(LABEL_KEY), ArtifactKind.MENU, origin)
    submenu = item.get(SUBMENU_KEY)
    if isinstance(submenu, list):
        for child in submenu:
            yield from _iter_menu_item(child, origin)


def iter_menu_usages(menus: Mapping[str, Any]) -> Iterator[KeyPathUsage]:
    for menu_name, menu_file in menus.items():
        if not isinstance(menu_file, Mapping):
            continue
        items = menu_file.get(MENU_KEY)
        if not isinstance(items, list):
            continue
        for item in items:
            yield from _iter_menu_item(item, menu_name)


def iter_context_menu_usages(menus: Mapping[str, Any]) -> Iterator[KeyPathUsage]:
    for menu_name, menu_file in menus.items():
        if not isinstance(menu_file, Mapping):
            continue
        groups = menu_file.get(CONTEXT_MENU_KEY)
        if not isinstance(groups, Mapping):
            continue
        for selector, items in groups.items():
            if not isinstance(items, list):
                continue
            origin = f"{menu_name}#{selector}"
            for item in items:
                if isinstance(item, Mapping):
                    yield from _label_usage(
                        item.get(LABEL_KEY), ArtifactKind.CONTEXT_MENU, origin
                    )


def _collect_from(path: Path, corpus: Dict[str, str]) -> None:
    # Symlinked directories are never descended into; a link cycle would recurse forever.
    if path.is_symlink():
        if path.is_file():
            corpus[str(path)] = read_text_lenient(path)
        return
    if path.is_dir():
        for child in sorted(path.iterdir()):
            _collect_from(child, corpus)
    elif path.is_file():
        corpus[str(path)] = read_text_lenient(path)


def collect_source_corpus(package_dir: Path | str, locations: Iterable[str]) -> Dict[str, str]:
    """Read every file under the whitelisted top-level entries of ``package_dir``.

    No file type filtering happens: anything below ``src``/``lib`` (or an
    ``index.js`` entry) is read as text.
    """

    root = Path(package_dir)
    corpus: Dict[str, str] = {}
    if not root.is_dir():
        return corpus
    wanted = set(locations)
    for entry in sorted(root.iterdir()):
        if entry.name in wanted:
            _collect_from(entry, corpus)
    return corpus


__all__ = [
    "RegexUsageExtractor",
    "UsageExtractor",
    "collect_source_corpus",
    "is_auto_translate_label",
    "iter_config_usages",
    "iter_context_menu_usages",
    "iter_menu_usages",
    "key_path_from_label",
]
