"""Per-file conversion: read, guess the width, rewrite and report.

Nothing here touches global state; every call gets the :class:`Options`
built by :mod:`spacestotabs.cli`.
"""
from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO

from .config import Options
from .indent import NO_SPACES, calc_tab_size, convert
from .lines import read_lines


class ConversionError(Exception):
    """Raised when a file cannot be read, decoded or written back."""

    def __init__(self, path: str, detail: str):
        super().__init__(detail)
        self.path = path
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.path}: error converting file: {self.detail}"


@dataclass(frozen=True)
class FileReport:
    path: str
    converted: bool
    tab_size: int = 0
    auto: bool = False
    remaining: int = 0

    def message(self) -> str:
        if not self.converted:
            return f"{self.path}: no spaces found"
        size_text = f"{self.tab_size} (auto)" if self.auto else str(self.tab_size)
        return (
            f"{self.path}: converted to tab size {size_text}, "
            f"{self.remaining} lines with spaces remaining"
        )


def make_reporter(options: Options, stream: TextIO | None = None) -> Callable[[str], None]:
    """Return a function printing status lines unless ``options.quiet`` is set."""

    def report(message: str) -> None:
        if options.quiet:
            return
        print(message, file=stream if stream is not None else sys.stdout)

    return report


def write_lines(path: str | os.PathLike[str], lines: Iterable[str]) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write("".join(lines))


def convert_file(path: str, options: Options) -> FileReport:
    try:
        records = read_lines(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConversionError(path, str(exc)) from exc

    size = calc_tab_size(records)
    if size is NO_SPACES:
        return FileReport(path=path, converted=False)

    if not options.auto:
        size = options.tab_size

    result = convert(records, size)

    if not options.dry_run:
        try:
            write_lines(path, result.lines)
        except OSError as exc:
            raise ConversionError(path, str(exc)) from exc

    return FileReport(
        path=path,
        converted=True,
        tab_size=result.tab_size,
        auto=options.auto,
        remaining=result.remaining,
    )


def convert_paths(
    options: Options, out: TextIO | None = None, err: TextIO | None = None
) -> bool:
    """Convert every path in ``options``; return False if any of them failed.

    A failing path is reported on ``err`` and the remaining paths are still
    processed.
    """

    report = make_reporter(options, out)
    ok = True
    for path in options.paths:
        try:
            file_report = convert_file(path, options)
        except ConversionError as exc:
            print(str(exc), file=err if err is not None else sys.stderr)
            ok = False
            continue
        report(file_report.message())
    return ok
