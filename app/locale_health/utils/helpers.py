from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Union


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def read_text_lenient(path: Union[str, Path]) -> str:
    """Read a file as UTF-8, substituting undecodable bytes instead of failing.

    Binary files under a source directory are read as-is; they simply never
    match an extraction rule.
    """

    return Path(path).read_text(encoding="utf-8", errors="replace")
