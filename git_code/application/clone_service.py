"""Application service for resolving a name fragment and cloning the match."""

import logging
from typing import Callable, List, Optional, Sequence

from git_code.application.lister_service import ListerService
from git_code.domain.errors import AmbiguousRepositoryMatch, NoRepositoryMatch
from git_code.domain.interfaces import RepositoryCloner
from git_code.domain.repository import RepositoryRecord

logger = logging.getLogger(__name__)


def resolve(candidates: Sequence[RepositoryRecord], fragment: str = "") -> RepositoryRecord:
    """
    Pick the single candidate for a name fragment.
    
    Raises:
        NoRepositoryMatch: If there are no candidates
        AmbiguousRepositoryMatch: If there is more than one candidate
    """
    if not candidates:
        raise NoRepositoryMatch(fragment)
    if len(candidates) > 1:
        raise AmbiguousRepositoryMatch(fragment, [repo.name for repo in candidates])
    return candidates[0]


def default_directory(repo: RepositoryRecord) -> str:
    """Directory a repository is cloned into when none is given: ./<name>."""
    return f"./{repo.name}"


class CloneService:
    """Service for cloning exactly one repository matched by name fragment."""
    
    def __init__(self, lister: ListerService, cloner: RepositoryCloner):
        """
        Initialize clone service.
        
        Args:
            lister: Lister used to find candidates
            cloner: Clone backend
        """
        self.lister = lister
        self.cloner = cloner
    
    def find(self, organization: str, fragment: str) -> RepositoryRecord:
        """List the organization filtered by fragment and resolve to one repository."""
        candidates: List[RepositoryRecord] = self.lister.list_repositories(organization, fragment)
        return resolve(candidates, fragment)
    
    def clone(
        self,
        organization: str,
        fragment: str,
        token: str,
        directory: Optional[str] = None,
        on_clone_start: Optional[Callable[[str], None]] = None,
    ) -> str:
        """
        Resolve fragment to one repository and clone it.
        
        Args:
            organization: Organization login
            fragment: Name fragment; must match exactly one repository
            token: Access token used as the HTTPS password
            directory: Target directory, defaults to ./<repository-name>
            on_clone_start: Called with the target directory once the match is resolved
        
        Returns:
            The directory cloned into
        """
        repo = self.find(organization, fragment)
        target = directory or default_directory(repo)
        logger.info(f"Resolved '{fragment}' to {repo.name}; cloning into {target}")
        if on_clone_start:
            on_clone_start(target)
        self.cloner.clone(repo.clone_http, target, token)
        return target
