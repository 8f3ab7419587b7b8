from __future__ import annotations

import dataclasses
from pathlib import Path

LABEL_WIDTH = 20
DEFAULT_DAYS = 7


@dataclasses.dataclass(frozen=True)
class Repo:
    id: str
    path: Path
    include_paths: tuple[str, ...] = ()
    groups: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        return self.id.ljust(LABEL_WIDTH)

    def pathspec_args(self) -> list[str]:
        if not self.include_paths:
            return []
        return ["--", *self.include_paths]


@dataclasses.dataclass(frozen=True)
class ReportOptions:
    filter_by_email: bool = False
    days: int = DEFAULT_DAYS
    user_email: str = ""
    show_cherry_picks: bool = True


@dataclasses.dataclass
class ReportTotals:
    commits: int = 0
    pull_requests: int = 0
