"""Test configuration and fixtures."""

import os
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import Mock

import pytest

# Set environment variables immediately when this module is imported
# This ensures they're available before any other modules try to load Settings
test_env_vars = {
    "GITHUB_TOKEN": "test_github_token_123",
    "GITHUB_API_BASE_URL": "https://api.github.com",
    "GITHUB_PER_PAGE": "100",
    "GITHUB_REQUEST_TIMEOUT": "5",
    "MAX_WORKERS": "4",
    "LOG_LEVEL": "WARNING",
}

for key, value in test_env_vars.items():
    os.environ[key] = value


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment() -> Generator[None, None, None]:
    """Set up test environment variables."""
    yield

    for key in test_env_vars:
        os.environ.pop(key, None)


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """Reload settings from the environment around a test."""
    from github_list_all_prs.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_repo() -> Callable[..., dict[str, Any]]:
    """Build repository JSON as returned by the GitHub API."""

    def _make_repo(name: str, owner: str = "alice", private: bool = False) -> dict[str, Any]:
        return {
            "id": abs(hash((owner, name))) % 100000,
            "name": name,
            "full_name": f"{owner}/{name}",
            "private": private,
            "owner": {"login": owner},
            "html_url": f"https://github.com/{owner}/{name}",
        }

    return _make_repo


@pytest.fixture
def make_pr() -> Callable[..., dict[str, Any]]:
    """Build pull request JSON as returned by the GitHub API."""

    def _make_pr(
        number: int,
        title: str,
        state: str = "open",
        author: str | None = "alice",
        labels: tuple[str, ...] = (),
    ) -> dict[str, Any]:
        return {
            "id": 1000 + number,
            "number": number,
            "title": title,
            "state": state,
            "user": {"login": author, "name": author} if author else None,
            "labels": [{"id": i, "name": label} for i, label in enumerate(labels)],
        }

    return _make_pr


@pytest.fixture
def fake_github() -> Callable[..., Mock]:
    """Build a mock GitHub client serving the given repositories and pull requests.

    ``prs_by_repo`` maps ``owner/name`` to the pull requests of that repository;
    the mock filters them by the requested state the way GitHub does.
    """

    def _fake_github(repos: list[dict[str, Any]], prs_by_repo: dict[str, list[dict[str, Any]]]) -> Mock:
        client = Mock()
        client.list_user_repositories.return_value = repos
        client.list_organization_repositories.return_value = repos

        def list_pull_requests(owner: str, repo: str, state: str = "open", direction: str = "asc") -> list[dict]:
            prs = prs_by_repo.get(f"{owner}/{repo}", [])
            return [pr for pr in prs if state == "all" or pr["state"] == state]

        client.list_pull_requests.side_effect = list_pull_requests
        return client

    return _fake_github
