"""CLI entry point for git-relax.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from gitrelax.cli.config import config_app
from gitrelax.cli.commit import commit_command
from gitrelax.cli.pr import pull_command
from gitrelax.cli.main import main_command

# Main application
app = typer.Typer(
    name="git-relax",
    help="git-relax: AI-powered commit & PR generator",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands, each with its short alias
app.command("commit")(commit_command)
app.command("cm", hidden=True)(commit_command)
app.command("pull")(pull_command)
app.command("pr", hidden=True)(pull_command)

# Set the main callback for default behavior (interactive menu, --version)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "commit_command",
    "pull_command",
    "main_command",
]
