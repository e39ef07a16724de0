"""Reading text into line records that remember their leading spaces."""
from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class LineRecord:
    """A line of text along with its count of leading space characters."""

    spaces: int
    text: str


def count_spaces(text: str) -> int:
    """Return the length of the run of ``" "`` characters at the start of ``text``."""

    return len(text) - len(text.lstrip(" "))


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``"\\n"`` while keeping each line's terminator.

    Unlike :meth:`str.splitlines`, only line feeds end a line, so a ``"\\r"``
    before the feed stays part of the line content. The last line has no
    terminator when ``text`` does not end with one.
    """

    parts = text.split("\n")
    lines = [f"{part}\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def make_records(lines: Iterable[str]) -> list[LineRecord]:
    return [LineRecord(spaces=count_spaces(line), text=line) for line in lines]


def read_lines(path: str | os.PathLike[str]) -> list[LineRecord]:
    with open(path, encoding="utf-8", newline="") as f:
        content = f.read()
    return make_records(split_lines(content))
