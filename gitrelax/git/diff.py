"""Git diff utilities.

Contains:
- get_staged_diff: Diff of the staged changes
- get_branch_diff: Diff between a base reference and HEAD
"""

from gitrelax.git.runner import _run_git_command


def get_staged_diff() -> str:
    """Get the diff of staged changes, exactly as git prints it.

    Returns:
        The staged diff text (may be empty).

    Raises:
        GitError: If the git command fails.
    """
    return _run_git_command(["diff", "--cached"], strip=False)


def get_branch_diff(base: str) -> str:
    """Get the diff between a base reference and HEAD.

    Args:
        base: Base branch or reference (e.g. "main").

    Returns:
        The diff text for base..HEAD (may be empty).

    Raises:
        GitError: If the git command fails (e.g. unknown base).
    """
    return _run_git_command(["diff", f"{base}..HEAD"], strip=False)
