"""
Data models for the GitHub List All PRs tool
"""

from .repository import Account, Repository
from .pull_request import PRState, PullRequest
from .filters import FilterCriteria, LimitState, RepoLimitPolicy, StateSelector
from .options import RunOptions

__all__ = [
    "Account",
    "Repository",
    "PRState",
    "PullRequest",
    "FilterCriteria",
    "LimitState",
    "RepoLimitPolicy",
    "StateSelector",
    "RunOptions",
]
