"""Account and repository data models."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Account:
    """A GitHub user or organization whose repositories are listed."""

    username: str
    is_organization: bool = False

    @property
    def kind(self) -> str:
        return "organization" if self.is_organization else "user"


@dataclass(frozen=True)
class Repository:
    """Repository snapshot taken once per run."""

    name: str
    owner_login: str
    is_private: bool = False

    def __repr__(self) -> str:
        return f"<Repository(full_name='{self.full_name}', private={self.is_private})>"

    @property
    def full_name(self) -> str:
        return f"{self.owner_login}/{self.name}"

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.full_name}"

    @classmethod
    def from_github_data(cls, github_data: dict[str, Any]) -> "Repository":
        """Create instance from GitHub API data."""
        return cls(
            name=github_data["name"],
            owner_login=github_data["owner"]["login"],
            is_private=bool(github_data.get("private", False)),
        )
