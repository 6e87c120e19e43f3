"""Repository enumeration for user and organization accounts."""

from ..exceptions import AccountNotFoundError, UnauthorizedError
from ..github.client import GitHubAPIClient, GitHubAPIError, TransportErrorKind
from ..models import Account, Repository
from ..utils import get_logger

logger = get_logger(__name__)


def list_repositories(
    client: GitHubAPIClient,
    account: Account,
    include_collaborator_repos: bool = False,
) -> list[Repository]:
    """List every repository of an account, in GitHub's order.

    Args:
    ----
        client: GitHub API client
        account: User or organization to enumerate
        include_collaborator_repos: Also list repositories a user collaborates
            on. Ignored for organizations.

    Returns:
    -------
        List of repositories

    Raises:
    ------
        AccountNotFoundError: If the account does not exist
        UnauthorizedError: If the credentials are rejected

    """
    try:
        if account.is_organization:
            repo_data = client.list_organization_repositories(account.username)
        else:
            repo_type = "all" if include_collaborator_repos else "owner"
            repo_data = client.list_user_repositories(account.username, repo_type)
    except GitHubAPIError as e:
        if e.kind is TransportErrorKind.NOT_FOUND:
            raise AccountNotFoundError(account.username) from e
        if e.kind is TransportErrorKind.UNAUTHORIZED:
            raise UnauthorizedError() from e
        raise

    repositories = [Repository.from_github_data(data) for data in repo_data]
    logger.info("Found %d repositories for %s %s", len(repositories), account.kind, account.username)
    return repositories
