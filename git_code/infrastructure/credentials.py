"""Access token loading."""

import logging
from pathlib import Path

from git_code.domain.errors import MissingTokenError
from git_code.domain.interfaces import CredentialSource

logger = logging.getLogger(__name__)


class TokenFileCredentialSource(CredentialSource):
    """Reads a personal access token from a plain-text file."""
    
    def __init__(self, path: Path):
        """
        Args:
            path: Token file location
        """
        self.path = Path(path)
    
    def load_token(self) -> str:
        """Read the token, stripped of surrounding whitespace."""
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except OSError as e:
            logger.debug(f"Could not read token file {self.path}: {e}")
            token = ""
        
        if not token:
            raise MissingTokenError(str(self.path))
        
        logger.info(f"Loaded access token from {self.path}")
        return token
