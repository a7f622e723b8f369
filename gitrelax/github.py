"""GitHub CLI wrapper for opening pull requests."""

import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)


class GitHubError(Exception):
    """Raised when the GitHub CLI is missing or a gh command fails."""

    pass


def ensure_gh_available() -> None:
    """Check that the GitHub CLI is installed.

    Raises:
        GitHubError: If gh is not on PATH.
    """
    # noinspection PyArgumentList
    if not shutil.which("gh"):
        raise GitHubError(
            "GitHub CLI (gh) is not installed or not in PATH.\n"
            "Install it from https://cli.github.com/ and run 'gh auth login'."
        )


def create_pull_request(title: str, body: str, base: str) -> str:
    """Open a pull request for the current branch.

    Args:
        title: Pull request title.
        body: Pull request description (markdown).
        base: Branch the pull request targets.

    Returns:
        The URL of the created pull request.

    Raises:
        GitHubError: If gh is missing or `gh pr create` fails.
    """
    args = ["gh", "pr", "create", "--title", title, "--body", body, "--base", base]
    logger.debug("Running: gh pr create --base %s", base)
    try:
        result = subprocess.run(
            args,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise GitHubError("GitHub CLI (gh) is not installed or not in PATH.")

    if result.returncode != 0:
        raise GitHubError(f"gh pr create failed: {result.stderr.strip()}")

    return result.stdout.strip()
