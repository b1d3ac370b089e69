"""Key path indexing and lookup over nested locale documents."""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..exceptions import LocaleValueError

LeafVisitor = Callable[[str, str], None]

_UNESCAPED_DOT = re.compile(r"(?<!\\)\.")


def join_key_path(parent: str, key: str) -> str:
    return f"{parent}.{key}" if parent else key


def split_key_path(key_path: str) -> List[str]:
    """Split on dots, keeping ``\\.`` escaped dots inside a segment."""

    if not key_path:
        return []
    return [segment.replace("\\.", ".") for segment in _UNESCAPED_DOT.split(key_path)]


def walk_leaves(document: Mapping[str, Any], visit: LeafVisitor, parent: str = "") -> None:
    """Depth-first, pre-order walk calling ``visit(key_path, text)`` for each leaf.

    Strings are leaves and mappings are branches; any other value raises
    :class:`LocaleValueError` instead of being silently skipped.
    """

    for key, value in document.items():
        key_path = join_key_path(parent, str(key))
        if isinstance(value, str):
            visit(key_path, value)
        elif isinstance(value, Mapping):
            walk_leaves(value, visit, key_path)
        else:
            raise LocaleValueError(key_path, type(value).__name__)


def index_key_paths(document: Mapping[str, Any]) -> Dict[str, bool]:
    index: Dict[str, bool] = {}

    def _mark(key_path: str, _text: str) -> None:
        index[key_path] = True

    walk_leaves(document, _mark)
    return index


def get_value_at_key_path(document: Any, key_path: str) -> Optional[Any]:
    """Return the value at ``key_path`` or ``None`` when a segment is missing.

    The value may be a branch: ``get_value_at_key_path(doc, "a")`` returns the
    nested mapping under ``a``. An empty path returns ``document`` itself.
    """

    value = document
    for segment in split_key_path(key_path):
        if not isinstance(value, Mapping) or segment not in value:
            return None
        value = value[segment]
    return value


__all__ = [
    "LeafVisitor",
    "get_value_at_key_path",
    "index_key_paths",
    "join_key_path",
    "split_key_path",
    "walk_leaves",
]
