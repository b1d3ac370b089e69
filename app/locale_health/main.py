"""Command-line entrypoint: scan locale files and print a health report."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Mapping, Optional, TextIO

from .app import create_health_check
from .models import PackageRecord, ScanResults
from .schemas import ScanReportSchema

BOLD = "\x1b[1m"
RESET = "\x1b[0m"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locale-health-check",
        description="Report duplicate, missing and unused translation key paths.",
    )
    parser.add_argument(
        "patterns",
        nargs="+",
        help=(
            "Glob pattern(s) matching locale files; supports '**' and '{a,b}' "
            "alternatives, e.g. 'packages/*/locales/*.{cson,json}'"
        ),
    )
    parser.add_argument(
        "--cwd",
        type=Path,
        default=None,
        help="Directory the patterns are resolved against (default: current directory)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the result set as JSON instead of plain text",
    )
    parser.add_argument(
        "--log-results",
        action="store_true",
        help="Also send the raw result set to the verbose log",
    )
    return parser


def _print_table(rows: Mapping[str, object], out: TextIO, indent: str = "  ") -> None:
    if not rows:
        print(f"{indent}(none)", file=out)
        return
    width = max(len(str(key)) for key in rows)
    for key, value in rows.items():
        print(f"{indent}{str(key).ljust(width)}  {value}", file=out)


def _render_package(name: str, pack: PackageRecord, out: TextIO) -> None:
    print(f"{BOLD}{name}{RESET}: {pack.directory}", file=out)
    _print_table(
        {
            "has_duplicates": pack.has_dups,
            "has_en_locale": pack.has_en_locale,
            "has_errors": pack.has_errors,
        },
        out,
    )
    if pack.has_errors:
        print(f"  {BOLD}Errors{RESET}", file=out)
        for index, message in enumerate(pack.errs):
            print(f"    {index}: {message}", file=out)
    print(f"  {BOLD}KeyPaths Popularity in Package{RESET}", file=out)
    _print_table(pack.used_key_paths, out, indent="    ")


def render_text(results: ScanResults, out: TextIO) -> None:
    for name, pack in results.packages.items():
        _render_package(name, pack, out)
    print("Pulsar Commons", file=out)
    _print_table(results.commons_key_maps_used, out)


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    cwd = (args.cwd or Path.cwd()).resolve()
    # stdout carries nothing but the document in JSON mode.
    banner_stream = sys.stderr if args.json else sys.stdout
    print(f"Starting: cwd: '{cwd}'; glob: '{','.join(args.patterns)}'", file=banner_stream)

    health_check = create_health_check(cwd, args.patterns, log_results=args.log_results)
    results = asyncio.run(health_check.scan())

    if args.json:
        json.dump(ScanReportSchema().dump(results), sys.stdout, indent=2)
        print()
    else:
        render_text(results, sys.stdout)
    return 0


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
