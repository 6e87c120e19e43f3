"""Pull request fetching and client-side filtering."""

from ..exceptions import RepositoryForbiddenError, RepositoryNotFoundError
from ..github.client import GitHubAPIClient, GitHubAPIError, TransportErrorKind
from ..models import FilterCriteria, PullRequest, Repository, StateSelector
from ..utils import get_logger

logger = get_logger(__name__)


def list_pull_requests(
    client: GitHubAPIClient,
    repository: Repository,
    selector: StateSelector,
    criteria: FilterCriteria | None = None,
) -> list[PullRequest]:
    """Get the pull requests of one repository, oldest first.

    Args:
    ----
        client: GitHub API client
        repository: Repository to query
        selector: Which states to request
        criteria: Author and label filters applied after fetching

    Returns:
    -------
        Matching pull requests in creation order

    Raises:
    ------
        RepositoryForbiddenError: If access to the repository is refused
        RepositoryNotFoundError: If the repository no longer exists

    """
    try:
        pr_data = client.list_pull_requests(
            repository.owner_login,
            repository.name,
            state=selector.api_state,
            direction="asc",
        )
    except GitHubAPIError as e:
        if e.kind is TransportErrorKind.FORBIDDEN:
            raise RepositoryForbiddenError(repository.full_name) from e
        if e.kind is TransportErrorKind.NOT_FOUND:
            raise RepositoryNotFoundError(repository.full_name) from e
        raise

    pull_requests = [PullRequest.from_github_data(data) for data in pr_data]
    if criteria is not None:
        pull_requests = criteria.apply(pull_requests)

    logger.debug("%s: %d of %d pull requests match", repository.full_name, len(pull_requests), len(pr_data))
    return pull_requests
