"""
Crowdin Sync Client - Git Branch Resolver

Looks up the name of the currently checked-out Git branch.
Used to expand the #GIT_BRANCH# placeholder in remote filenames.

Author: Crowdin Sync Project
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from exceptions import BranchResolutionError

logger = logging.getLogger(__name__)


class GitBranchResolver:
    """
    Callable returning the current branch name of a working tree.

    Raises BranchResolutionError instead of returning an empty or
    detached-HEAD name, so a bad remote filename is never produced.
    """

    def __init__(self, repo_path: Optional[str] = None, git_executable: str = "git"):
        """
        Initialize resolver.

        Args:
            repo_path: Working tree to inspect (default: current directory)
            git_executable: Name or path of the git binary
        """
        self.repo_path = Path(repo_path) if repo_path else None
        self.git_executable = git_executable

    def __call__(self) -> str:
        return self.current_branch()

    def current_branch(self) -> str:
        """
        Get the current branch name.

        Returns:
            Branch name (e.g., "main")

        Raises:
            BranchResolutionError: If git is unavailable, fails, or HEAD is detached
        """
        command = [self.git_executable, "rev-parse", "--abbrev-ref", "HEAD"]
        logger.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                cwd=str(self.repo_path) if self.repo_path else None,
                capture_output=True,
                text=True,
                check=False
            )
        except OSError as e:
            raise BranchResolutionError(f"Cannot run git: {e}") from e

        if result.returncode != 0:
            message = result.stderr.strip() or f"git exited with status {result.returncode}"
            raise BranchResolutionError(f"Cannot determine git branch: {message}")

        branch = result.stdout.strip()
        if not branch:
            raise BranchResolutionError("Cannot determine git branch: empty output")
        if branch == "HEAD":
            raise BranchResolutionError("Cannot determine git branch: HEAD is detached")

        return branch
