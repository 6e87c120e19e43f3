"""
Command-line entry point

Usage:
    github-list-all-prs user USERNAME         - PRs of a personal account's repositories
    github-list-all-prs org USERNAME          - PRs of an organization's repositories (alias: organization)
"""

import click
from pydantic import ValidationError

from . import __version__
from .exceptions import PullRequestListingError
from .github.client import GitHubAPIClient, GitHubAPIError
from .models import RepoLimitPolicy, RunOptions, StateSelector
from .services.display_aggregator import DisplayAggregator
from .utils import setup_logging


class AliasGroup(click.Group):
    """Click Group that supports command aliases without duplicate help entries."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._aliases = {}  # alias -> canonical name

    def add_alias(self, name, alias):
        self._aliases[alias] = name

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, self._aliases.get(cmd_name, cmd_name))


def listing_options(func):
    """Options shared by the user and organization commands."""
    options = [
        click.argument("username"),
        click.option("-t", "--token", help="GitHub personal access token to use (default: $GITHUB_TOKEN)."),
        click.option("--no-private", "no_private", is_flag=True, help="Do not list PRs of private repositories."),
        click.option("--open", "open_", is_flag=True, help="List open PRs (the default)."),
        click.option("--closed", is_flag=True, help="List closed PRs."),
        click.option("--all", "all_", is_flag=True, help="List all PRs (open and closed)."),
        click.option("--author", help="List PRs by the given author."),
        click.option("--label", help="List PRs with the given label."),
        click.option(
            "--repo-limit",
            type=click.IntRange(min=0),
            default=0,
            show_default=True,
            help="Limit the number of PRs that can be shown by repository (0 for no limit).",
        ),
        click.option(
            "--global-limit",
            type=click.IntRange(min=0),
            default=0,
            show_default=True,
            help="Limit the number of PRs that can be shown globally (0 for no limit).",
        ),
        click.option(
            "--repo-limit-policy",
            type=click.Choice([policy.value for policy in RepoLimitPolicy]),
            default=RepoLimitPolicy.STOP_RUN.value,
            show_default=True,
            help="Whether hitting --repo-limit ends the run or moves on to the next repository.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def run_listing(is_organization: bool, include_collaborator_repos: bool = False, **params) -> None:
    """Validate the parsed parameters and print the digest."""
    try:
        selector = StateSelector.from_flags(open=params["open_"], closed=params["closed"], all=params["all_"])
        options = RunOptions(
            username=params["username"],
            is_organization=is_organization,
            token=params["token"],
            exclude_private=params["no_private"],
            include_collaborator_repos=include_collaborator_repos,
            state_selector=selector,
            author=params["author"],
            label=params["label"],
            per_repo_limit=params["repo_limit"],
            global_limit=params["global_limit"],
            repo_limit_policy=RepoLimitPolicy(params["repo_limit_policy"]),
        )
    except (ValueError, ValidationError) as e:
        raise click.UsageError(str(e)) from e

    client = GitHubAPIClient(options.token)
    try:
        DisplayAggregator(client).run(options)
    except (PullRequestListingError, GitHubAPIError) as e:
        raise click.ClickException(str(e)) from e


@click.group(cls=AliasGroup, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-v", "--version", prog_name="github-list-all-prs")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for diagnostics on stderr (default: $LOG_LEVEL or WARNING).",
)
def cli(log_level):
    """List all PRs of all repositories of a GitHub user or organization."""
    setup_logging(level=log_level)


@cli.command("user")
@listing_options
@click.option(
    "--collaborator",
    is_flag=True,
    help="Also list repositories the user collaborates on (only usable for the authenticated user).",
)
def user_command(collaborator, **params):
    """List all PRs of all repositories under a personal user account."""
    run_listing(is_organization=False, include_collaborator_repos=collaborator, **params)


@cli.command("org")
@listing_options
def org_command(**params):
    """List all PRs of all repositories under an organization."""
    run_listing(is_organization=True, **params)


cli.add_alias("org", "organization")


if __name__ == "__main__":
    cli(prog_name="github-list-all-prs")
