"""Ports the application services depend on.

Infrastructure provides the real implementations; tests substitute stubs.
"""

from abc import ABC, abstractmethod

from git_code.domain.repository import RepositoryPage


class CredentialSource(ABC):
    """Supplies the personal access token."""
    
    @abstractmethod
    def load_token(self) -> str:
        """
        Return a non-empty token.
        
        Raises:
            MissingTokenError: If no token is available
        """
        pass


class RepositoryHost(ABC):
    """Hosting service that owns the organization's repositories."""
    
    @abstractmethod
    def check_rate_limit(self) -> int:
        """
        Probe the service with the current credentials.
        
        Returns:
            Remaining API calls
        
        Raises:
            AuthenticationError: If the probe fails
        """
        pass
    
    @abstractmethod
    def list_organization_repositories(self, organization: str, page: int = 1) -> RepositoryPage:
        """
        Fetch a single page of the organization's repositories.
        
        Raises:
            GitHubAPIError: If the request fails
        """
        pass


class RepositoryCloner(ABC):
    """Clones a repository to a local directory."""
    
    @abstractmethod
    def clone(self, url: str, directory: str, token: str) -> None:
        """
        Raises:
            CloneError: If the clone fails
        """
        pass
