"""State selection, filtering and display limit models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .pull_request import PRState, PullRequest


@dataclass(frozen=True)
class StateSelector:
    """Which pull request states to list. At least one flag is always set."""

    include_open: bool = True
    include_closed: bool = False

    def __post_init__(self) -> None:
        if not (self.include_open or self.include_closed):
            raise ValueError("A state selector must include open or closed pull requests.")

    @classmethod
    def from_flags(cls, open: bool = False, closed: bool = False, all: bool = False) -> "StateSelector":  # noqa: A002
        """Resolve the mutually exclusive open/closed/all flags.

        No flag selects open pull requests. More than one flag raises ValueError.
        """
        if sum((open, closed, all)) > 1:
            raise ValueError("You must only provide one of --open, --closed, or --all.")
        if all:
            return cls(include_open=True, include_closed=True)
        if closed:
            return cls(include_open=False, include_closed=True)
        return cls(include_open=True, include_closed=False)

    @property
    def api_state(self) -> str:
        """State query parameter of the pulls endpoint."""
        if self.include_open and self.include_closed:
            return "all"
        if self.include_open:
            return "open"
        return "closed"

    def accepts(self, state: PRState) -> bool:
        return self.include_open if state is PRState.OPEN else self.include_closed


@dataclass(frozen=True)
class FilterCriteria:
    """Optional author and label filters applied after fetching."""

    author: Optional[str] = None
    label: Optional[str] = None

    def apply(self, pull_requests: list[PullRequest]) -> list[PullRequest]:
        """Keep the pull requests matching the author, then the label filter."""
        if self.author:
            pull_requests = [pr for pr in pull_requests if pr.author_name == self.author]
        if self.label:
            pull_requests = [pr for pr in pull_requests if pr.has_label(self.label)]
        return pull_requests


class RepoLimitPolicy(str, Enum):
    """What reaching the per-repository limit does to the rest of the run."""

    STOP_RUN = "stop-run"
    NEXT_REPOSITORY = "next-repository"


class LimitState:
    """Displayed-PR counters for one run.

    ``0`` as a limit means unlimited. The global counter only grows; the
    per-repository counter is reset by :meth:`start_repository`.
    """

    def __init__(self, per_repo_limit: int = 0, global_limit: int = 0) -> None:
        self.per_repo_limit = per_repo_limit
        self.global_limit = global_limit
        self.global_displayed = 0
        self.per_repo_displayed = 0

    def __repr__(self) -> str:
        return (
            f"<LimitState(per_repo={self.per_repo_displayed}/{self.per_repo_limit}, "
            f"global={self.global_displayed}/{self.global_limit})>"
        )

    def start_repository(self) -> None:
        self.per_repo_displayed = 0

    def displayable(self, total: int) -> int:
        """How many of ``total`` pull requests the current repository may show."""
        displayable = total
        if self.per_repo_limit > 0:
            displayable = min(displayable, self.per_repo_limit)
        if self.global_limit > 0:
            displayable = min(displayable, self.global_limit - self.global_displayed)
        return max(displayable, 0)

    def record(self) -> None:
        self.per_repo_displayed += 1
        self.global_displayed += 1

    @property
    def global_limit_reached(self) -> bool:
        return self.global_limit > 0 and self.global_displayed >= self.global_limit

    @property
    def repo_limit_reached(self) -> bool:
        return self.per_repo_limit > 0 and self.per_repo_displayed >= self.per_repo_limit
