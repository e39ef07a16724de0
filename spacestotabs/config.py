# spacestotabs/config.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

DEFAULTS = {
    # 0 means the width is guessed per file.
    "tab_size": 0,
    "quiet": False,
    "dry_run": False,
}


@dataclass(frozen=True)
class Options:
    """Settings for one run, parsed once from the command line."""

    tab_size: int = DEFAULTS["tab_size"]
    quiet: bool = DEFAULTS["quiet"]
    dry_run: bool = DEFAULTS["dry_run"]
    paths: tuple[str, ...] = field(default_factory=tuple)

    @property
    def auto(self) -> bool:
        return self.tab_size <= 0

    @classmethod
    def from_values(
        cls,
        paths: Sequence[str],
        *,
        tab_size: int = DEFAULTS["tab_size"],
        quiet: bool = DEFAULTS["quiet"],
        dry_run: bool = DEFAULTS["dry_run"],
    ) -> Options:
        if tab_size < 0:
            raise ValueError(f"tab size must not be negative, got {tab_size}")
        return cls(tab_size=tab_size, quiet=quiet, dry_run=dry_run, paths=tuple(paths))
