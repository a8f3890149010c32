"""Repository cloning backed by GitPython."""

import logging
import os
import sys
import tempfile
from pathlib import Path
from typing import Dict, Optional, TextIO

import git

from git_code.domain.errors import CloneError
from git_code.domain.interfaces import RepositoryCloner

logger = logging.getLogger(__name__)

# Any non-empty username works with token authentication over HTTPS.
TOKEN_USERNAME = "gittoken"
TOKEN_ENV_VAR = "GIT_CODE_TOKEN"

ASKPASS_SCRIPT = """#!/bin/sh
case "$1" in
    Username*) printf "%s" "{username}" ;;
    *) printf "%s" "${token_var}" ;;
esac
"""

STAGE_NAMES = {
    git.RemoteProgress.COUNTING: "Counting objects",
    git.RemoteProgress.COMPRESSING: "Compressing objects",
    git.RemoteProgress.WRITING: "Writing objects",
    git.RemoteProgress.RECEIVING: "Receiving objects",
    git.RemoteProgress.RESOLVING: "Resolving deltas",
    git.RemoteProgress.FINDING_SOURCES: "Finding sources",
    git.RemoteProgress.CHECKING_OUT: "Checking out files",
}


def askpass_env(script_dir: Path, token: str) -> Dict[str, str]:
    """
    Build a git environment that answers credential prompts with the token.
    
    The token only lives in the child process environment, so git never
    writes it into the cloned repository's config.
    
    Args:
        script_dir: Directory to write the askpass helper into
        token: Access token used as the basic-auth password
    
    Returns:
        Environment for the git subprocess
    """
    script = Path(script_dir) / "askpass.sh"
    script.write_text(
        ASKPASS_SCRIPT.format(username=TOKEN_USERNAME, token_var=TOKEN_ENV_VAR),
        encoding="utf-8",
    )
    script.chmod(0o700)
    
    env = os.environ.copy()
    env["GIT_ASKPASS"] = str(script)
    env["GIT_TERMINAL_PROMPT"] = "0"
    env[TOKEN_ENV_VAR] = token
    return env


class ConsoleProgress(git.RemoteProgress):
    """Writes git's progress lines to a stream."""
    
    def __init__(self, stream: Optional[TextIO] = None):
        """
        Args:
            stream: Where progress lines go, stdout by default
        """
        super().__init__()
        self.stream = stream or sys.stdout
    
    def update(self, op_code, cur_count, max_count=None, message=""):
        """Format one progress report, e.g. 'Receiving objects: 50% (1/2)'."""
        stage = STAGE_NAMES.get(op_code & self.OP_MASK, "Working")
        if max_count:
            line = f"{stage}: {int(cur_count * 100 / max_count)}% ({int(cur_count)}/{int(max_count)})"
        else:
            line = f"{stage}: {int(cur_count or 0)}"
        if message:
            line += f" {message}"
        self.stream.write(line + "\n")
        self.stream.flush()


class GitPythonCloner(RepositoryCloner):
    """Clones over HTTPS with the token as basic-auth password, recursing into submodules."""
    
    def __init__(self, progress_stream: Optional[TextIO] = None):
        """
        Args:
            progress_stream: Where clone progress goes, stdout by default
        """
        self.progress_stream = progress_stream
    
    def clone(self, url: str, directory: str, token: str) -> None:
        """
        Clone url into directory.
        
        git itself refuses to clone into an existing non-empty directory;
        that refusal is reported as a CloneError like any other git failure.
        """
        logger.info(f"Cloning {url} into {directory}")
        with tempfile.TemporaryDirectory(prefix="git-code-") as script_dir:
            try:
                git.Repo.clone_from(
                    url,
                    directory,
                    progress=ConsoleProgress(self.progress_stream),
                    env=askpass_env(script_dir, token),
                    multi_options=["--recurse-submodules"],
                )
            except git.GitCommandError as e:
                detail = (e.stderr or str(e)).replace(token, "***").strip()
                raise CloneError(f"Failed to clone the repository {url}: {detail}") from e
        logger.info(f"Clone of {url} completed")
