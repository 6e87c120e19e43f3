"""Display aggregation: enumerate, fetch in parallel, print a bounded digest."""

import shutil
import sys
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TextIO

import click

from ..config import get_settings
from ..github.client import GitHubAPIClient
from ..models import LimitState, PullRequest, RepoLimitPolicy, Repository, RunOptions
from ..utils import LoggerMixin
from .pull_request_fetcher import list_pull_requests
from .repository_enumerator import list_repositories

DEFAULT_TERMINAL_WIDTH = 80
ELLIPSIS = "..."


def terminal_width() -> int:
    """Current terminal width, or 80 columns when it cannot be determined."""
    return shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns or DEFAULT_TERMINAL_WIDTH


def format_heading(repository: Repository, displayable: int, total: int) -> str:
    """Bold ``owner/name`` followed by ``(shown)`` or ``(shown/total)``."""
    count = f" ({total})" if displayable == total else f" ({displayable}/{total})"
    return click.style(repository.full_name, bold=True, underline=True) + click.style(count, underline=True)


def format_pull_request(repository: Repository, pull_request: PullRequest, width: int) -> str:
    """One digest line, with the title cut to fit ``width`` columns."""
    prefix = f"[{pull_request.state.label}] {repository.html_url}/pull/{pull_request.number}: "
    remaining = width - len(prefix)
    title = pull_request.title
    if len(title) > remaining:
        title = title[: max(0, remaining - len(ELLIPSIS))] + ELLIPSIS
    return prefix + title


class DisplayAggregator(LoggerMixin):
    """Lists the pull requests of every repository of an account."""

    def __init__(
        self,
        client: GitHubAPIClient,
        out: TextIO | None = None,
        width: int | None = None,
        max_workers: int | None = None,
    ) -> None:
        """Initialize the aggregator.

        Args:
        ----
            client: GitHub API client used for every request
            out: Stream receiving the digest, stdout by default
            width: Fixed line width, the terminal width by default
            max_workers: Size of the pull request fetch pool

        """
        self.client = client
        self.out = out
        self.width = width
        self.max_workers = max_workers or get_settings().max_workers

    def _echo(self, message: str = "") -> None:
        click.echo(message, file=self.out or sys.stdout)

    def fetch_all(self, repositories: list[Repository], options: RunOptions) -> list[list[PullRequest]]:
        """Fetch the pull requests of every repository concurrently.

        Results come back in ``repositories`` order. The first failure in that
        order is raised; fetches still in flight are left to finish.
        """
        if not repositories:
            return []

        criteria = options.criteria
        executor = ThreadPoolExecutor(max_workers=min(self.max_workers, len(repositories)))
        try:
            futures: list[Future] = [
                executor.submit(list_pull_requests, self.client, repo, options.state_selector, criteria)
                for repo in repositories
            ]
            return [future.result() for future in futures]
        except Exception:
            self.logger.debug("Pull request fetch failed", exc_info=True)
            raise
        finally:
            executor.shutdown(wait=False)

    def run(self, options: RunOptions) -> None:
        """List repositories, fetch their pull requests and print the digest.

        Args:
        ----
            options: Validated run options

        Raises:
        ------
            PullRequestListingError: On a fatal, caller-actionable failure
            GitHubAPIError: On any other GitHub error

        """
        repositories = list_repositories(self.client, options.account, options.include_collaborator_repos)
        if options.exclude_private:
            repositories = [repo for repo in repositories if not repo.is_private]

        self._echo(f"Listing PRs from {len(repositories)} repositories. This may take a while.")
        all_prs = self.fetch_all(repositories, options)

        width = self.width or terminal_width()
        limits = LimitState(options.per_repo_limit, options.global_limit)
        for repo, prs in zip(repositories, all_prs):
            if not prs:
                continue

            limits.start_repository()
            displayable = limits.displayable(len(prs))
            self._echo(format_heading(repo, displayable, len(prs)))

            for pr in prs[:displayable]:
                self._echo(format_pull_request(repo, pr, width))
                limits.record()
                if limits.global_limit_reached:
                    self.logger.info("Global limit of %d reached", limits.global_limit)
                    return
                if limits.repo_limit_reached:
                    if options.repo_limit_policy is RepoLimitPolicy.STOP_RUN:
                        self.logger.info("Limit of %d reached on %s", limits.per_repo_limit, repo.full_name)
                        return
                    break

            self._echo()
