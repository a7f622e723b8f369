"""Shared utility functions for CLI commands."""

import logging
from typing import Optional

import typer

from gitrelax import global_config
from gitrelax.config import DEFAULT_BASE_BRANCH
from gitrelax.git import NoChangesError, get_default_branch
from gitrelax.llm import ChatClient, get_client


def configure_logging(verbose: bool) -> None:
    """Configure logging on stderr.

    Args:
        verbose: If True, log at DEBUG level; otherwise only warnings.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # The HTTP stack is noisy at DEBUG and would echo request headers
    for name in ("httpx", "httpcore", "openai"):
        logging.getLogger(name).setLevel(logging.WARNING)


def build_client() -> ChatClient:
    """Build a chat client using the configured request timeout.

    Raises:
        MissingAPIKeyError: If no API key is set.
        GlobalConfigError: If the config file is invalid.
    """
    return get_client(timeout=global_config.get_timeout())


def resolve_base_branch(base: Optional[str]) -> str:
    """Pick the base branch for a pull request.

    Priority: explicit option > base_branch in config > origin's default
    branch > "main".

    Args:
        base: Value of the --base option, if given.

    Returns:
        The base branch name.
    """
    if base:
        return base

    configured = global_config.get_base_branch()
    if configured:
        return configured

    return get_default_branch() or DEFAULT_BASE_BRANCH


def ensure_changes(diff: str, message: str) -> str:
    """Return the diff, or raise if it has nothing in it.

    Args:
        diff: The diff text to check.
        message: Message for the error when the diff is blank.

    Raises:
        NoChangesError: If the diff is empty or only whitespace.
    """
    if not diff.strip():
        raise NoChangesError(message)
    return diff


def show_block(text: str) -> None:
    """Print generated text between separator lines on stdout."""
    typer.echo("")
    typer.echo("=" * 60)
    typer.echo(text)
    typer.echo("=" * 60)
    typer.echo("")
