"""Parsers for the CSON/JSON documents packages ship (locales, menus).

CSON is read with the ``cson`` package, which accepts both the brace syntax
(members separated by newlines or commas) and the indentation syntax.
``.json`` files go through the standard ``json`` module.

``cson`` builds its mappings with plain dict assignment, so repeated keys are
silently collapsed. Strict parsing swaps the grammar's key rule for the length
of one parse so that every parsed key is a distinct :class:`_KeyOccurrence`;
the tree is then collapsed back to plain dicts, failing on the first repeat.
"""

from __future__ import annotations

import json
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple, Union

import cson  # type: ignore[import-untyped]
from cson import parser as cson_parser  # type: ignore[import-untyped]

from ..exceptions import DuplicateKeyError, StructuredFileError

JSON_SUFFIXES = frozenset({".json"})

_KEY_RULE_LOCK = threading.Lock()


class _RepeatedKey(Exception):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key


class _KeyOccurrence:
    """One parsed CSON key. Hashes by identity, so repeats stay separate entries."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name


@contextmanager
def _distinct_key_occurrences() -> Iterator[None]:
    original = cson_parser._p_key

    def _p_key(p: Any) -> _KeyOccurrence:
        return _KeyOccurrence(original(p))

    with _KEY_RULE_LOCK:
        cson_parser._p_key = _p_key
        try:
            yield
        finally:
            cson_parser._p_key = original


def _collapse_occurrences(value: Any) -> Any:
    if isinstance(value, dict):
        result: Dict[str, Any] = {}
        for key, child in value.items():
            name = key.name if isinstance(key, _KeyOccurrence) else key
            if name in result:
                raise _RepeatedKey(str(name))
            result[name] = _collapse_occurrences(child)
        return result
    if isinstance(value, list):
        return [_collapse_occurrences(item) for item in value]
    return value


def _reject_duplicate_pairs(pairs: List[Tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise _RepeatedKey(key)
        result[key] = value
    return result


def _is_blank_cson(text: str) -> bool:
    for line in text.lstrip("\ufeff").splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            return False
    return True


def _parse_json(text: str, source: str, allow_duplicate_keys: bool) -> Any:
    try:
        if allow_duplicate_keys:
            return json.loads(text)
        return json.loads(text, object_pairs_hook=_reject_duplicate_pairs)
    except _RepeatedKey as exc:
        raise DuplicateKeyError(source, exc.key) from exc
    except json.JSONDecodeError as exc:
        raise StructuredFileError(source, str(exc)) from exc


def _parse_cson(text: str, source: str, allow_duplicate_keys: bool) -> Any:
    if _is_blank_cson(text):
        return None
    try:
        if allow_duplicate_keys:
            return cson.loads(text)
        with _distinct_key_occurrences():
            parsed = cson.loads(text)
        return _collapse_occurrences(parsed)
    except _RepeatedKey as exc:
        raise DuplicateKeyError(source, exc.key) from exc
    except (cson.ParseError, ValueError) as exc:
        raise StructuredFileError(source, str(exc)) from exc


def parse_structured_text(
    text: str,
    *,
    source: str = "<string>",
    suffix: str = "",
    allow_duplicate_keys: bool = True,
) -> Any:
    """Parse ``text`` with the parser matching ``suffix``.

    An empty (or comment-only) document parses to an empty mapping.
    """

    if suffix.lower() in JSON_SUFFIXES:
        parsed = _parse_json(text, source, allow_duplicate_keys)
    else:
        parsed = _parse_cson(text, source, allow_duplicate_keys)
    return {} if parsed is None else parsed


def parse_structured_file(
    path: Union[str, Path], *, allow_duplicate_keys: bool = True
) -> Any:
    """Read and parse a structured document from disk.

    Raises :class:`DuplicateKeyError` when ``allow_duplicate_keys`` is false and
    any mapping (at any depth) repeats a key, and :class:`StructuredFileError`
    for unreadable or malformed files.
    """

    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StructuredFileError(file_path, str(exc)) from exc
    return parse_structured_text(
        text,
        source=str(file_path),
        suffix=file_path.suffix,
        allow_duplicate_keys=allow_duplicate_keys,
    )


__all__ = ["parse_structured_file", "parse_structured_text"]
