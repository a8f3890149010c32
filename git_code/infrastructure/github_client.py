"""GitHub REST API client for organization repository listings."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, urlparse

import requests

from git_code.config import DEFAULT_API_URL, DEFAULT_HTTP_TIMEOUT
from git_code.domain.errors import AuthenticationError, GitHubAPIError
from git_code.domain.interfaces import RepositoryHost
from git_code.domain.repository import RepositoryPage, RepositoryRecord

logger = logging.getLogger(__name__)


class GitHubRESTClient(RepositoryHost):
    """Client for the GitHub REST API authenticated with a personal access token."""
    
    PER_PAGE = 100  # GitHub's maximum page size for repository listings
    
    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize GitHub REST client.
        
        Args:
            token: GitHub personal access token
            api_url: API base URL, e.g. https://github.example.com/api/v3 for Enterprise
            timeout: Per-request timeout in seconds
            session: Optional pre-built session (mainly for tests)
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
        })
    
    def __enter__(self) -> "GitHubRESTClient":
        """Use the client as a context manager that closes its session."""
        return self
    
    def __exit__(self, exc_type, exc, tb):
        """Close the session."""
        self.close()
    
    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()
    
    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        Execute a GET request and map failures onto domain errors.
        
        Raises:
            AuthenticationError: On HTTP 401
            GitHubAPIError: On any other transport or HTTP failure
        """
        url = f"{self.api_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise GitHubAPIError(f"Request to {url} failed: {e}") from e
        
        if response.status_code == 401:
            raise AuthenticationError("Authentication failed. Check your GitHub token.")
        if response.status_code == 403 and response.headers.get("X-RateLimit-Remaining") == "0":
            raise GitHubAPIError(
                f"Rate limit exceeded (resets at {response.headers.get('X-RateLimit-Reset', 'unknown')})"
            )
        if response.status_code == 404:
            raise GitHubAPIError(f"Not found: {url}")
        
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise GitHubAPIError(f"GitHub API error: {e}") from e
        
        return response
    
    def check_rate_limit(self) -> int:
        """
        Check rate limits for the authenticated user.
        
        If this fails we assume that authentication has failed.
        
        Returns:
            Remaining core API calls
        """
        try:
            response = self._get("/rate_limit")
            data = response.json()
        except (GitHubAPIError, ValueError) as e:
            raise AuthenticationError(f"Problem in getting rate limit information {e}") from e
        
        core = data.get("resources", {}).get("core", data.get("rate", {}))
        remaining = int(core.get("remaining", 0))
        logger.info(f"Rate limit check passed. API calls remaining: {remaining}")
        return remaining
    
    def list_organization_repositories(self, organization: str, page: int = 1) -> RepositoryPage:
        """
        Fetch one page of an organization's repositories.
        
        Args:
            organization: Organization login
            page: 1-based page number
        
        Returns:
            The page's records and the next page number, if any
        """
        response = self._get(
            f"/orgs/{organization}/repos",
            params={"per_page": self.PER_PAGE, "page": page},
        )
        try:
            payload = response.json()
        except ValueError as e:
            raise GitHubAPIError(f"Invalid JSON in repository listing: {e}") from e
        
        records = [RepositoryRecord.from_api(item) for item in payload]
        next_page = self._next_page(response)
        logger.info(f"Fetched page {page} of '{organization}': {len(records)} repositories")
        return RepositoryPage(records=records, next_page=next_page)
    
    @staticmethod
    def _next_page(response: requests.Response) -> Optional[int]:
        """Extract the next page number from the Link header."""
        next_link = response.links.get("next")
        if not next_link:
            return None
        
        query = parse_qs(urlparse(next_link.get("url", "")).query)
        pages = query.get("page")
        if not pages:
            return None
        try:
            return int(pages[0])
        except ValueError:
            return None
