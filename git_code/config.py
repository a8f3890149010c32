"""Request-scoped configuration built from environment variables and CLI overrides."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from git_code.domain.errors import ConfigurationError

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TOKEN_FILE = "~/.gittoken"
DEFAULT_HTTP_TIMEOUT = 30


@dataclass(frozen=True)
class Settings:
    """Configuration for a single git-code invocation."""
    
    organization: str = ""
    api_url: str = DEFAULT_API_URL
    token_file: Path = Path(DEFAULT_TOKEN_FILE).expanduser()
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    
    @classmethod
    def from_env(cls, organization: Optional[str] = None) -> "Settings":
        """
        Build settings from the environment.
        
        Args:
            organization: Overrides GIT_CODE_ORGANIZATION when given
        """
        if organization is None:
            organization = os.getenv("GIT_CODE_ORGANIZATION", "")
        
        timeout = os.getenv("GIT_CODE_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT))
        try:
            http_timeout = float(timeout)
        except ValueError:
            raise ConfigurationError(f"GIT_CODE_HTTP_TIMEOUT must be a number, got '{timeout}'")
        
        return cls(
            organization=organization.strip(),
            api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/"),
            token_file=Path(os.getenv("GIT_CODE_TOKEN_FILE", DEFAULT_TOKEN_FILE)).expanduser(),
            http_timeout=http_timeout,
        )
    
    def require_organization(self) -> str:
        """Return the organization, raising ConfigurationError when none is set."""
        if not self.organization:
            raise ConfigurationError(
                "No organization configured. Set GIT_CODE_ORGANIZATION or pass --organization."
            )
        return self.organization
