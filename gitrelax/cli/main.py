"""Root callback: global options and the interactive menu."""

from typing import Optional

import typer

from gitrelax import __version__
from gitrelax.cli.commit import run_commit
from gitrelax.cli.pr import run_pull_request
from gitrelax.cli.utils import configure_logging

# (key, label) pairs shown in the interactive menu
MENU_ITEMS = [
    ("cm", "Commit - generate an AI commit message"),
    ("pr", "Pull Request - create a PR with an AI description"),
]


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-relax {__version__}")
        raise typer.Exit()


def run_interactive() -> None:
    """Ask which action to run and run it."""
    typer.echo("Git Relax")
    typer.echo()
    typer.echo("What would you like to do?")
    for i, (_, label) in enumerate(MENU_ITEMS, 1):
        typer.echo(f"  {i}. {label}")

    choice = typer.prompt(f"Select an action (1-{len(MENU_ITEMS)})", type=int, default=1)

    if choice < 1 or choice > len(MENU_ITEMS):
        typer.echo("Invalid choice. Aborting.", err=True)
        raise typer.Exit(1)

    action = MENU_ITEMS[choice - 1][0]
    if action == "cm":
        run_commit()
    else:
        run_pull_request()

    typer.echo("Done!", err=True)


def main_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log git invocations and LLM requests to stderr",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """AI-powered commit & PR generator.

    Environment:
      OPENROUTER_API_KEY  OpenRouter API key (recommended)
      OPENAI_API_KEY      OpenAI API key
      LLM_MODEL           Model override (optional)
    """
    configure_logging(verbose)

    # If a subcommand is invoked, don't run the menu
    if ctx.invoked_subcommand is not None:
        return

    run_interactive()
