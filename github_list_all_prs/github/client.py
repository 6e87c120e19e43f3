"""GitHub API client for listing repositories and pull requests."""

import threading
import time
from enum import Enum
from typing import Any
from urllib.parse import urljoin

import requests

from github_list_all_prs.config import get_github_headers, get_settings
from github_list_all_prs.utils import get_logger

logger = get_logger(__name__)


class TransportErrorKind(str, Enum):
    """Classification of a failed GitHub API request."""

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    OTHER = "other"

    @classmethod
    def from_status(cls, status_code: int) -> "TransportErrorKind":
        return {
            401: cls.UNAUTHORIZED,
            403: cls.FORBIDDEN,
            404: cls.NOT_FOUND,
        }.get(status_code, cls.OTHER)


class GitHubAPIError(Exception):
    """Exception raised when a GitHub API request fails."""

    def __init__(self, kind: TransportErrorKind, status_code: int, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code
        self.message = message


class GitHubAPIClient:
    """GitHub API client with pagination, rate limiting and error classification."""

    def __init__(
        self,
        access_token: str | None = None,
        base_url: str | None = None,
        per_page: int | None = None,
    ) -> None:
        """Initialize GitHub API client.

        Args:
        ----
            access_token: GitHub personal access token, falls back to GITHUB_TOKEN
            base_url: API root, falls back to the configured base URL
            per_page: Page size for paginated endpoints (max 100)

        """
        settings = get_settings()
        self.access_token = access_token or settings.github_token
        self.base_url = (base_url or settings.github_api_base_url).rstrip("/") + "/"
        self.per_page = per_page or settings.github_per_page
        self.timeout = settings.request_timeout

        self.session = requests.Session()
        self.session.headers.update(get_github_headers(self.access_token))
        if not self.access_token:
            logger.warning("No GitHub token provided, using unauthenticated requests")

        # Rate limiting, shared by the worker threads fetching pull requests
        self.rate_limit_remaining: int | None = None
        self.rate_limit_reset: int | None = None
        self._rate_limit_lock = threading.Lock()

    def _check_rate_limit(self) -> bool:
        """Wait for the rate limit window to reset if it is exhausted and close.

        Returns True if it waited.
        """
        with self._rate_limit_lock:
            if self.rate_limit_remaining is None or self.rate_limit_remaining > 0:
                return False
            if self.rate_limit_reset is None:
                return False
            wait_time = self.rate_limit_reset - time.time()
            if not 0 < wait_time < 60:
                return False
            logger.info("Rate limit exceeded, waiting %.1f seconds", wait_time)
            time.sleep(wait_time + 1)
            self.rate_limit_remaining = None
            return True

    def _update_rate_limit(self, response: requests.Response) -> None:
        with self._rate_limit_lock:
            if "X-RateLimit-Remaining" in response.headers:
                self.rate_limit_remaining = int(response.headers["X-RateLimit-Remaining"])
            if "X-RateLimit-Reset" in response.headers:
                self.rate_limit_reset = int(response.headers["X-RateLimit-Reset"])

    @staticmethod
    def _is_rate_limited(response: requests.Response) -> bool:
        return response.status_code in (403, 429) and response.headers.get("X-RateLimit-Remaining") == "0"

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return body["message"]
        return f"{response.status_code} {response.reason}"

    def _make_request(self, method: str, url: str, **kwargs: Any) -> requests.Response:  # noqa: ANN401
        """Make HTTP request with rate limiting and error handling.

        Args:
        ----
            method: HTTP method (GET, POST, etc.)
            url: Request URL, absolute or relative to the API root
            **kwargs: Additional request parameters

        Returns:
        -------
            requests.Response: Response object

        Raises:
        ------
            GitHubAPIError: If GitHub answers with an error status
            requests.RequestException: If the request itself fails

        """
        self._check_rate_limit()

        # Ensure URL is complete
        if not url.startswith(("http://", "https://")):
            url = urljoin(self.base_url, url.lstrip("/"))

        kwargs.setdefault("timeout", self.timeout)
        logger.debug("Making %s request to %s", method, url)

        try:
            response = self.session.request(method, url, **kwargs)
            self._update_rate_limit(response)

            # A window that resets within a minute is waited out once
            if self._is_rate_limited(response):
                logger.warning("Rate limit exceeded")
                if self._check_rate_limit():
                    response = self.session.request(method, url, **kwargs)
                    self._update_rate_limit(response)

        except requests.RequestException:
            logger.exception("Request failed")
            raise

        if response.ok:
            return response

        message = self._error_message(response)
        if self._is_rate_limited(response):
            kind = TransportErrorKind.OTHER
        else:
            kind = TransportErrorKind.from_status(response.status_code)
        logger.debug("%s %s failed with %d (%s)", method, url, response.status_code, kind.value)
        raise GitHubAPIError(kind, response.status_code, message)

    def get_paginated(self, url: str, params: dict | None = None) -> list[dict]:
        """Get all results from a paginated endpoint.

        Follows the ``Link: rel="next"`` header until the last page.

        Args:
        ----
            url: API endpoint URL
            params: Query parameters for the first page

        Returns:
        -------
            List of all results, in the order GitHub returned them

        """
        request_params = dict(params) if params else {}
        request_params["per_page"] = self.per_page

        all_results: list[dict] = []
        next_url: str | None = url
        page = 1
        while next_url:
            response = self._make_request("GET", next_url, params=request_params)
            results = response.json()
            all_results.extend(results)
            logger.debug("Fetched page %d of %s (%d items)", page, url, len(results))

            # The next link already carries the query string
            next_url = response.links.get("next", {}).get("url")
            request_params = None
            page += 1

        return all_results

    def list_user_repositories(self, username: str, repo_type: str = "owner") -> list[dict]:
        """Get repositories of a personal account.

        Args:
        ----
            username: GitHub username
            repo_type: 'owner' for owned repositories, 'all' to add collaborations

        Returns:
        -------
            List of repository dictionaries

        """
        return self.get_paginated(f"/users/{username}/repos", {"type": repo_type})

    def list_organization_repositories(self, organization: str) -> list[dict]:
        """Get all repositories of an organization.

        Args:
        ----
            organization: Organization name

        Returns:
        -------
            List of repository dictionaries

        """
        return self.get_paginated(f"/orgs/{organization}/repos", {"type": "all"})

    def list_pull_requests(self, owner: str, repo: str, state: str = "open", direction: str = "asc") -> list[dict]:
        """Get pull requests for a repository.

        Args:
        ----
            owner: Repository owner
            repo: Repository name
            state: PR state ('open', 'closed', 'all')
            direction: Creation order, 'asc' lists the oldest first

        Returns:
        -------
            List of pull request dictionaries

        """
        return self.get_paginated(f"/repos/{owner}/{repo}/pulls", {"state": state, "direction": direction})
