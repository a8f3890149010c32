"""
git-code CLI - list and clone an organization's GitHub repositories.

Examples:

    git-code show "spoon" --organization "myorg"
    git-code clone "mute-spoon"
    git-code clone "mute-spoon" --directory "JIRA-2150"
"""

import json
import logging
import os
import sys
from typing import Optional

import typer

from git_code.application.clone_service import CloneService
from git_code.application.lister_service import ListerService
from git_code.config import Settings
from git_code.domain.errors import AmbiguousRepositoryMatch, GitCodeError
from git_code.infrastructure.credentials import TokenFileCredentialSource
from git_code.infrastructure.git_cloner import GitPythonCloner
from git_code.infrastructure.github_client import GitHubRESTClient

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="git-code",
    help="List and clone the repositories of a GitHub organization.",
    add_completion=False,
)


def configure_logging(level: str):
    """Send log records to stderr so stdout stays reserved for command output."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def fail(message: str, err: bool = True):
    """Print message and end the command with exit status 1."""
    typer.echo(message, err=err)
    raise typer.Exit(code=1)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress at INFO level"),
):
    """List and clone the repositories of a GitHub organization."""
    level = "INFO" if verbose else os.getenv("LOG_LEVEL", "WARNING").upper()
    configure_logging(level)


def show(
    name_filter: str = typer.Argument("", help="Only show repositories whose name contains this"),
    organization: Optional[str] = typer.Option(None, "--organization", "-o", help="GitHub organization"),
):
    """Get a list of repositories for your Organization as JSON."""
    try:
        settings = Settings.from_env(organization=organization)
        org = settings.require_organization()
        token = TokenFileCredentialSource(settings.token_file).load_token()
        with GitHubRESTClient(token, api_url=settings.api_url, timeout=settings.http_timeout) as client:
            repos = ListerService(client).list_repositories(org, name_filter)
    except GitCodeError as e:
        logger.error(f"show failed: {e}")
        fail(str(e))
    
    typer.echo(json.dumps([repo.to_dict() for repo in repos], indent=2))


def clone(
    name_fragment: Optional[str] = typer.Argument(None, help="Partial repository name; must match exactly one"),
    directory: Optional[str] = typer.Option(
        None,
        "--directory",
        "-d",
        help="Target directory to clone into, existing directory must be empty.",
    ),
    organization: Optional[str] = typer.Option(None, "--organization", "-o", help="GitHub organization"),
):
    """
    Clone a repository.
    
    Multiple matches print every matching name; the clone only happens when
    the fragment matches a single repository.
    """
    if not name_fragment:
        fail("Must specify a repository name as an argument.\n#> git-code clone 'reponame'", err=False)
    
    try:
        settings = Settings.from_env(organization=organization)
        org = settings.require_organization()
        token = TokenFileCredentialSource(settings.token_file).load_token()
        with GitHubRESTClient(token, api_url=settings.api_url, timeout=settings.http_timeout) as client:
            service = CloneService(ListerService(client), GitPythonCloner())
            service.clone(
                org,
                name_fragment,
                token,
                directory=directory,
                on_clone_start=lambda target: typer.echo(f"Cloning into {target}"),
            )
    except AmbiguousRepositoryMatch as e:
        fail(str(e), err=False)
    except GitCodeError as e:
        logger.error(f"clone failed: {e}")
        fail(str(e))


app.command("show")(show)
for alias in ("s", "list", "l"):
    app.command(alias, hidden=True)(show)

app.command("clone")(clone)
for alias in ("c", "cl"):
    app.command(alias, hidden=True)(clone)


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
