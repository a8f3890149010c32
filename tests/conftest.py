"""Shared test fixtures and stubs."""

from pathlib import Path
import sys
from typing import Dict, List, Optional

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from git_code.domain.errors import AuthenticationError  # noqa: E402
from git_code.domain.interfaces import RepositoryCloner, RepositoryHost  # noqa: E402
from git_code.domain.repository import RepositoryPage, RepositoryRecord  # noqa: E402


def record(name: str, private: bool = False) -> RepositoryRecord:
    return RepositoryRecord(
        name=name,
        url=f"https://github.com/acme/{name}",
        clone_ssh=f"git@github.com:acme/{name}.git",
        clone_http=f"https://github.com/acme/{name}.git",
        private=private,
    )


class StubHost(RepositoryHost):
    """Serves pre-built pages; page N is pages[N - 1]."""

    def __init__(self, pages: List[List[str]], rate_limit_ok: bool = True):
        self.pages = [[record(name) for name in page] for page in pages]
        self.rate_limit_ok = rate_limit_ok
        self.rate_limit_calls = 0
        self.requested_pages: List[int] = []
        self.organizations: List[str] = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True

    def check_rate_limit(self) -> int:
        self.rate_limit_calls += 1
        if not self.rate_limit_ok:
            raise AuthenticationError("Problem in getting rate limit information: 401")
        return 5000

    def list_organization_repositories(self, organization: str, page: int = 1) -> RepositoryPage:
        self.organizations.append(organization)
        self.requested_pages.append(page)
        records = self.pages[page - 1] if self.pages else []
        next_page = page + 1 if page < len(self.pages) else None
        return RepositoryPage(records=records, next_page=next_page)


class StubCloner(RepositoryCloner):
    def __init__(self, error: Optional[Exception] = None):
        self.calls: List[Dict[str, str]] = []
        self.error = error

    def clone(self, url: str, directory: str, token: str) -> None:
        self.calls.append({"url": url, "directory": directory, "token": token})
        if self.error:
            raise self.error


@pytest.fixture
def make_host():
    return StubHost


@pytest.fixture
def spoon_host():
    return StubHost([["miro-windows-spoon", "global-mute-spoon"]])


@pytest.fixture
def stub_cloner():
    return StubCloner()


@pytest.fixture
def make_record():
    return record


@pytest.fixture
def token_file(tmp_path):
    path = tmp_path / ".gittoken"
    path.write_text("  ghp_testtoken123\n", encoding="utf-8")
    return path


@pytest.fixture
def make_cloner():
    return StubCloner
