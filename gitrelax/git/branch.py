"""Git branch and remote utilities.

Contains:
- get_branch: Get the current branch name
- has_upstream: Check whether the current branch tracks a remote branch
- push_current_branch: Publish the current branch to origin
- get_default_branch: Detect the remote's default branch
"""

import subprocess

from gitrelax.git.runner import _run_git_command
from gitrelax.git.exceptions import GitError


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or 'HEAD (detached)' in detached state.
    """
    branch = _run_git_command(["branch", "--show-current"])
    if not branch:
        # Detached HEAD state
        return "HEAD (detached)"
    return branch


def has_upstream() -> bool:
    """Check whether the current branch already has an upstream.

    Returns:
        True if @{u} resolves, False otherwise (including when git is missing).
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "@{u}"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def push_current_branch() -> None:
    """Push the current branch to origin and set its upstream.

    Raises:
        GitError: If the push fails.
    """
    _run_git_command(["push", "-u", "origin", "HEAD"])


def get_default_branch() -> str | None:
    """Detect the default branch of origin.

    Returns:
        The branch name (e.g. "main"), or None if origin/HEAD is not set.
    """
    try:
        ref = _run_git_command(["symbolic-ref", "--short", "refs/remotes/origin/HEAD"])
    except GitError:
        return None
    if not ref:
        return None
    # "origin/main" -> "main"
    return ref.split("/", 1)[1] if "/" in ref else ref
