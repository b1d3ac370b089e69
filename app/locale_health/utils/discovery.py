from __future__ import annotations

import glob
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Set, Tuple, Union


def _is_ignored(relative: Path, ignore_dirs: Set[str]) -> bool:
    # Only directory components count; a file literally named like an ignored
    # directory is still matched.
    return any(part in ignore_dirs for part in relative.parts[:-1])


def _find_brace_group(pattern: str) -> Optional[Tuple[int, int, List[str]]]:
    """Locate the first ``{a,b}`` group with a top-level comma.

    Returns ``(start, end, alternatives)`` with ``end`` pointing at the closing
    brace, or ``None`` when the pattern has nothing to expand.
    """

    start = 0
    while True:
        start = pattern.find("{", start)
        if start < 0:
            return None
        depth = 0
        commas: List[int] = []
        for index in range(start, len(pattern)):
            char = pattern[index]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    if commas:
                        bounds = [start, *commas, index]
                        alternatives = [
                            pattern[bounds[i] + 1 : bounds[i + 1]]
                            for i in range(len(bounds) - 1)
                        ]
                        return start, index, alternatives
                    break
            elif char == "," and depth == 1:
                commas.append(index)
        start += 1


def expand_braces(pattern: str) -> List[str]:
    """``packages/*/locales/*.{cson,json}`` -> one pattern per alternative.

    Groups nest and combine; braces without a top-level comma stay literal.
    """

    group = _find_brace_group(pattern)
    if group is None:
        return [pattern]
    start, end, alternatives = group
    prefix, suffix = pattern[:start], pattern[end + 1 :]
    expanded: List[str] = []
    for alternative in alternatives:
        expanded.extend(expand_braces(prefix + alternative + suffix))
    return expanded


def _relative_to_base(match: str, root: Path) -> Path:
    candidate = Path(match)
    if not candidate.is_absolute():
        return candidate
    for anchor in (root.absolute(), root.resolve()):
        try:
            return candidate.relative_to(anchor)
        except ValueError:
            continue
    return candidate


def match_files(
    patterns: Union[str, Sequence[str]],
    base_dir: Union[str, Path],
    ignore_dirs: Iterable[str] = ("node_modules",),
) -> List[str]:
    """Expand glob ``patterns`` relative to ``base_dir``.

    Supports ``**`` and ``{a,b}`` alternatives. Absolute patterns are accepted;
    their matches are reported relative to ``base_dir`` when they fall inside
    it and as absolute paths otherwise.

    Returns sorted, de-duplicated POSIX paths. Directory entries and anything
    below one of ``ignore_dirs`` are left out.
    """

    root = Path(base_dir)
    pattern_list = [patterns] if isinstance(patterns, str) else list(patterns)
    ignored = set(ignore_dirs)
    matches: Set[str] = set()
    for pattern in pattern_list:
        cleaned = pattern.strip()
        if not cleaned:
            continue
        for expanded in expand_braces(cleaned):
            for match in glob.glob(expanded, root_dir=root, recursive=True):
                relative = _relative_to_base(match, root)
                if not (root / relative).is_file():
                    continue
                if _is_ignored(relative, ignored):
                    continue
                matches.add(relative.as_posix())
    return sorted(matches)


__all__ = ["expand_braces", "match_files"]
