"""CLI command for generating a commit message and committing."""

import typer

from gitrelax.formatters import normalize_commit_message
from gitrelax.git import GitError, NoChangesError, commit, get_repo_root, get_staged_diff
from gitrelax.global_config import GlobalConfigError
from gitrelax.llm import COMMIT, LLMError, MissingAPIKeyError
from gitrelax.cli.utils import build_client, ensure_changes, show_block


def run_commit(yes: bool = False) -> None:
    """Generate a commit message for the staged changes and commit them.

    Args:
        yes: Skip the edit and confirmation prompts.

    Raises:
        typer.Exit: With code 1 on any failure.
    """
    try:
        get_repo_root()
        diff = ensure_changes(get_staged_diff(), "No staged changes. Use 'git add' first.")
        client = build_client()

        while True:
            typer.echo("Generating commit message...", err=True)
            message = normalize_commit_message(client.chat(COMMIT, diff))
            show_block(message)

            if yes:
                break

            message = typer.prompt("Edit message", default=message)
            if typer.confirm("Commit?", default=True):
                break

            if not typer.confirm("Regenerate the commit message?", default=False):
                typer.echo("Commit cancelled.", err=True)
                return

        typer.echo("Committing...", err=True)
        if not commit(message):
            typer.echo("Commit failed!", err=True)
            raise typer.Exit(1)
        typer.echo("Committed!", err=True)

    except NoChangesError as e:
        typer.echo(f"Warning: {e}", err=True)
    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)
    except GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)


def commit_command(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Bypass the edit and confirmation prompts and commit immediately",
    ),
) -> None:
    """Generate a commit message from staged changes and commit."""
    run_commit(yes=yes)
