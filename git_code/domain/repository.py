"""Domain entities for hosted repositories."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RepositoryRecord:
    """Immutable repository entity."""
    
    name: str
    url: str
    clone_ssh: str
    clone_http: str
    private: bool
    
    @classmethod
    def from_api(cls, payload: Dict[str, Any]) -> "RepositoryRecord":
        """Build a record from a GitHub REST repository object."""
        return cls(
            name=payload.get("name") or "",
            url=payload.get("html_url") or "",
            clone_ssh=payload.get("ssh_url") or "",
            clone_http=payload.get("clone_url") or "",
            private=bool(payload.get("private", False)),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the JSON keys printed by `show`."""
        return {
            "name": self.name,
            "url": self.url,
            "cloneSsh": self.clone_ssh,
            "cloneHttp": self.clone_http,
            "private": self.private,
        }


@dataclass(frozen=True)
class RepositoryPage:
    """One page of an organization listing."""
    
    records: List[RepositoryRecord] = field(default_factory=list)
    next_page: Optional[int] = None  # None when upstream reports no further pages
