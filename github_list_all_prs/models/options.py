"""Validated options for one listing run."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .filters import FilterCriteria, RepoLimitPolicy, StateSelector
from .repository import Account


class RunOptions(BaseModel):
    """Everything the aggregator needs, checked once at the boundary."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    is_organization: bool = False
    token: Optional[str] = None
    exclude_private: bool = False
    include_collaborator_repos: bool = False
    state_selector: StateSelector = Field(default_factory=StateSelector)
    author: Optional[str] = None
    label: Optional[str] = None
    per_repo_limit: int = Field(0, ge=0)
    global_limit: int = Field(0, ge=0)
    repo_limit_policy: RepoLimitPolicy = RepoLimitPolicy.STOP_RUN

    @model_validator(mode="after")
    def _collaborator_needs_user(self) -> "RunOptions":
        if self.is_organization and self.include_collaborator_repos:
            raise ValueError("Collaborator repositories can only be listed for user accounts.")
        return self

    @property
    def account(self) -> Account:
        return Account(username=self.username, is_organization=self.is_organization)

    @property
    def criteria(self) -> FilterCriteria:
        return FilterCriteria(author=self.author, label=self.label)
