"""Errors raised while listing repositories and pull requests."""


class PullRequestListingError(Exception):
    """Base class for fatal, caller-actionable listing errors."""


class UnauthorizedError(PullRequestListingError):
    """The GitHub token is missing, invalid or expired."""

    def __init__(self, message: str = "Invalid GitHub credentials.") -> None:
        super().__init__(message)


class AccountNotFoundError(PullRequestListingError):
    """The queried user or organization does not exist."""

    def __init__(self, account: str) -> None:
        super().__init__(f"Account '{account}' was not found.")
        self.account = account


class RepositoryForbiddenError(PullRequestListingError):
    """Access to a repository's pull requests was refused."""

    def __init__(self, repository: str) -> None:
        super().__init__(f"Access to the pull requests of '{repository}' is forbidden.")
        self.repository = repository


class RepositoryNotFoundError(PullRequestListingError):
    """A repository vanished between enumeration and PR fetching."""

    def __init__(self, repository: str) -> None:
        super().__init__(f"Repository '{repository}' was not found. It may have been deleted.")
        self.repository = repository
