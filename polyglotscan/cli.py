"""Command line entry point: report which formats a file is valid as."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from tabulate import tabulate

from polyglotscan.registry import available_detectors

_HEADERS = ("Format", "Is Valid")
_VALID_MARK = "✓"
_INVALID_MARK = "x"


def scan(data: bytes, file_path: str, show_all: bool) -> list[tuple[str, bool]]:
    """Run every detector on ``data``.

    Returns ``(format, is_valid)`` pairs in detector order; unless
    ``show_all`` is set, only the formats that matched are kept.
    """
    results = []
    for detector in available_detectors():
        is_format = detector.detect(data, file_path)
        if show_all or is_format:
            results.append((detector.name, is_format))
    return results


def render_table(results: Iterable[tuple[str, bool]]) -> str:
    """Format scan results as a bordered table."""
    rows = [
        (name, _VALID_MARK if valid else _INVALID_MARK) for name, valid in results
    ]
    return tabulate(rows, headers=_HEADERS, tablefmt="grid")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyglot-detector", description="Detects polyglot file formats."
    )
    parser.add_argument("-f", "--file-path", required=True)
    parser.add_argument("-a", "--all", action="store_true", dest="show_all")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Scan the named file and print the table; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        data = Path(args.file_path).read_bytes()
        results = scan(data, args.file_path, args.show_all)
    except OSError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(render_table(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())