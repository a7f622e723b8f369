"""Git commit utilities."""

import logging
import subprocess

from gitrelax.git.exceptions import GitError

logger = logging.getLogger(__name__)


def commit(message: str) -> bool:
    """Commit the staged changes with the given message.

    Args:
        message: The full commit message.

    Returns:
        True if git reported success, False otherwise.

    Raises:
        GitError: If git is not installed.
    """
    logger.debug("Running: git commit -m <%d chars>", len(message))
    try:
        result = subprocess.run(
            ["git", "commit", "-m", message],
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    if result.returncode != 0:
        logger.debug("git commit failed: %s", result.stderr.strip())
    return result.returncode == 0
