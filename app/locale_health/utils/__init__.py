"""Filesystem collaborators: discovery, structured parsing and text helpers."""

from .discovery import match_files
from .helpers import now_iso, read_text_lenient
from .structured_files import parse_structured_file, parse_structured_text

__all__ = [
    "match_files",
    "now_iso",
    "parse_structured_file",
    "parse_structured_text",
    "read_text_lenient",
]
