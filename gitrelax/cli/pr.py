"""CLI command for creating a pull request with a generated description."""

from typing import Optional

import typer

from gitrelax.formatters import normalize_pr_body, normalize_pr_title, render_pr_preview
from gitrelax.git import (
    GitError,
    NoChangesError,
    get_branch,
    get_branch_diff,
    get_repo_root,
    has_upstream,
    push_current_branch,
)
from gitrelax.github import GitHubError, create_pull_request, ensure_gh_available
from gitrelax.global_config import GlobalConfigError
from gitrelax.llm import PR_BODY, PR_TITLE, LLMError, MissingAPIKeyError
from gitrelax.cli.utils import build_client, ensure_changes, resolve_base_branch, show_block


def run_pull_request(base: Optional[str] = None, yes: bool = False) -> None:
    """Generate a PR title and body for base..HEAD and open the PR.

    Both texts are generated before anything is pushed or created.

    Args:
        base: Base branch. Resolved from config or origin when omitted.
        yes: Skip the confirmation prompt.

    Raises:
        typer.Exit: With code 1 on any failure.
    """
    try:
        get_repo_root()
        base_branch = resolve_base_branch(base)
        diff = ensure_changes(
            get_branch_diff(base_branch),
            f"No changes compared to {base_branch}",
        )
        client = build_client()

        typer.echo("Generating PR...", err=True)
        title = normalize_pr_title(client.chat(PR_TITLE, diff))
        body = normalize_pr_body(client.chat(PR_BODY, diff))

        show_block(render_pr_preview(title, body))

        if not yes and not typer.confirm("Create PR?", default=True):
            typer.echo("Pull request cancelled.", err=True)
            return

        ensure_gh_available()

        if not has_upstream():
            typer.echo(f"Pushing {get_branch()} to origin...", err=True)
            push_current_branch()
            typer.echo("Pushed!", err=True)

        typer.echo("Creating PR...", err=True)
        url = create_pull_request(title, body, base_branch)
        typer.echo("Created!", err=True)
        typer.echo(url)

    except NoChangesError as e:
        typer.echo(f"Warning: {e}", err=True)
    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except GitHubError as e:
        typer.echo(f"GitHub error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)
    except GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)


def pull_command(
    base: Optional[str] = typer.Option(
        None,
        "--base",
        "-b",
        help="Base branch (default: config base_branch, origin's default branch, or main)",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Bypass the confirmation prompt and create the PR immediately",
    ),
) -> None:
    """Create a pull request with an AI-generated title and description."""
    run_pull_request(base=base, yes=yes)
