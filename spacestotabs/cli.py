from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from .config import DEFAULTS, Options
from .driver import convert_paths


class UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _tab_size(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid tab size: {value!r}") from None
    if size < 0:
        raise argparse.ArgumentTypeError(f"tab size must not be negative: {size}")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="spacestotabs",
        description="Convert leading spaces in text files to tabs, in place.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-s",
        "--size",
        type=_tab_size,
        default=DEFAULTS["tab_size"],
        metavar="N",
        help="Specify an exact tab size to use. 0 switches to auto mode (default).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=DEFAULTS["quiet"],
        help="Suppress output.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=DEFAULTS["dry_run"],
        help="Log only what would happen without actually modifying files.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Files to convert.")
    return parser


def parse_options(argv: Sequence[str]) -> Options:
    args = build_parser().parse_intermixed_args(list(argv))
    return Options.from_values(
        args.paths, tab_size=args.size, quiet=args.quiet, dry_run=args.dry_run
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_options(args)
    except UsageError as exc:
        print(f"spacestotabs: error: {exc}", file=sys.stderr)
        return 1
    except SystemExit as exc:
        # --help
        return exc.code if isinstance(exc.code, int) else 0

    if not options.paths:
        print("No files given, exiting.", file=sys.stderr)
        return 1

    return 0 if convert_paths(options) else 1


if __name__ == "__main__":
    sys.exit(main())
