"""Pull Request data model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PRState(str, Enum):
    """State of a pull request as reported by GitHub."""

    OPEN = "open"
    CLOSED = "closed"

    @property
    def label(self) -> str:
        """Capitalised form used in the digest, e.g. ``Open``."""
        return self.value.capitalize()


@dataclass(frozen=True)
class PullRequest:
    """Pull request snapshot taken once per run."""

    number: int
    title: str
    state: PRState
    author_name: str | None = None
    labels: frozenset[str] = field(default_factory=frozenset)

    def __repr__(self) -> str:
        return f"<PullRequest(number={self.number}, state={self.state.value}, title='{self.title[:50]}')>"

    @property
    def is_open(self) -> bool:
        return self.state is PRState.OPEN

    @property
    def is_closed(self) -> bool:
        return self.state is PRState.CLOSED

    def has_label(self, label: str) -> bool:
        return label in self.labels

    @classmethod
    def from_github_data(cls, github_data: dict[str, Any]) -> "PullRequest":
        """Create instance from GitHub API data.

        The author is the ``user.name`` field. It is unknown when the list
        response omits the name or ``user`` is null (deleted accounts).
        """
        user = github_data.get("user") or {}
        return cls(
            number=github_data["number"],
            title=github_data["title"],
            state=PRState(github_data["state"]),
            author_name=user.get("name"),
            labels=frozenset(label["name"] for label in github_data.get("labels", []) if label.get("name")),
        )
