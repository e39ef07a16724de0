from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .lines import LineRecord

MIN_TAB_SIZE = 2
MAX_TAB_SIZE = 10

# Returned by calc_tab_size when no line starts with a space.
NO_SPACES = None


@dataclass(frozen=True)
class WidthCandidate:
    size: int
    lines: int


@dataclass(frozen=True)
class Conversion:
    """Result of rewriting leading spaces as tabs."""

    tab_size: int
    lines: list[str]
    remaining: int


def _has_spaces(records: Sequence[LineRecord]) -> bool:
    return any(record.spaces > 0 for record in records)


def width_candidates(records: Sequence[LineRecord]) -> list[WidthCandidate]:
    """Count, for each width from the largest down, the lines it divides evenly."""

    candidates: list[WidthCandidate] = []
    for size in range(MAX_TAB_SIZE, MIN_TAB_SIZE - 1, -1):
        matches = sum(1 for record in records if record.spaces % size == 0)
        candidates.append(WidthCandidate(size=size, lines=matches))
    return candidates


def calc_tab_size(records: Sequence[LineRecord]) -> int | None:
    """Guess the indentation width used by ``records``.

    Returns :data:`NO_SPACES` when no line is indented with spaces. Otherwise
    the width dividing the most space counts wins; on a tie the larger width
    is kept because the scan runs from :data:`MAX_TAB_SIZE` downwards and only
    a strictly higher count replaces the current best.
    """

    if not _has_spaces(records):
        return NO_SPACES

    candidates = width_candidates(records)
    best = candidates[0]
    for cand in candidates[1:]:
        if cand.lines > best.lines:
            best = cand
    return best.size


def convert(records: Sequence[LineRecord], tab_size: int) -> Conversion:
    """Replace each line's leading spaces with as many tabs as fit.

    Spaces left over when a line's indentation is not a multiple of
    ``tab_size`` are kept after the tabs, and such lines are counted in
    :attr:`Conversion.remaining`.
    """

    if tab_size < 1:
        raise ValueError(f"tab size must be at least 1, got {tab_size}")

    converted: list[str] = []
    remaining = 0
    for record in records:
        tabs = record.spaces // tab_size
        width = tabs * tab_size
        converted.append("\t" * tabs + record.text[width:])
        if record.spaces > width:
            remaining += 1
    return Conversion(tab_size=tab_size, lines=converted, remaining=remaining)
