"""Errors raised by git-code. Every one of them ends the command with exit status 1."""

from typing import List


class GitCodeError(Exception):
    """Base class for all expected failures."""
    pass


class ConfigurationError(GitCodeError):
    """Raised when required configuration (e.g. the organization) is missing."""
    pass


class MissingTokenError(GitCodeError):
    """Raised when the access token file is absent or empty."""
    
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Token file not found at {path}.")


class GitHubAPIError(GitCodeError):
    """Raised when a call to the hosting API fails."""
    pass


class AuthenticationError(GitHubAPIError):
    """Raised when the rate limit probe fails, which we take to mean the token is bad."""
    pass


class NoRepositoryMatch(GitCodeError):
    """Raised when a name fragment matches no repository."""
    
    def __init__(self, fragment: str):
        self.fragment = fragment
        super().__init__(f"No repository matched '{fragment}'.")


class AmbiguousRepositoryMatch(GitCodeError):
    """Raised when a name fragment matches more than one repository."""
    
    def __init__(self, fragment: str, names: List[str]):
        self.fragment = fragment
        self.names = list(names)
        lines = ["Multiple Repository match, please be more specific:"]
        lines.extend(f"\t{name}" for name in self.names)
        super().__init__("\n".join(lines))


class CloneError(GitCodeError):
    """Raised when the clone itself fails."""
    pass
