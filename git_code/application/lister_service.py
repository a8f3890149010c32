"""Application service for listing an organization's repositories."""

import logging
from typing import List

from git_code.domain.errors import ConfigurationError
from git_code.domain.interfaces import RepositoryHost
from git_code.domain.repository import RepositoryRecord

logger = logging.getLogger(__name__)


class ListerService:
    """Walks every page of an organization listing and filters by name."""
    
    def __init__(self, repository_host: RepositoryHost):
        """
        Initialize lister service.
        
        Args:
            repository_host: Hosting API client
        """
        self.repository_host = repository_host
    
    def list_repositories(self, organization: str, name_filter: str = "") -> List[RepositoryRecord]:
        """
        List repositories of an organization.
        
        The rate limit probe runs first; if it fails the token is assumed bad
        and nothing is listed. Any failure while paging aborts the whole call.
        
        Args:
            organization: Organization login
            name_filter: Case-sensitive substring to match against names; empty matches all
        
        Returns:
            Matching repositories in upstream page order
        """
        if not organization:
            raise ConfigurationError("An organization is required to list repositories.")
        
        self.repository_host.check_rate_limit()
        
        all_repos: List[RepositoryRecord] = []
        page = 1
        pages_fetched = 0
        while True:
            result = self.repository_host.list_organization_repositories(organization, page=page)
            pages_fetched += 1
            
            for repo in result.records:
                if name_filter and name_filter not in repo.name:
                    continue
                all_repos.append(repo)
            
            if not result.next_page:
                break
            page = result.next_page
        
        logger.info(
            f"Listed {len(all_repos)} repositories from '{organization}' "
            f"across {pages_fetched} page(s) (filter: '{name_filter}')"
        )
        return all_repos
