"""CLI commands for global configuration management."""

import typer

from gitrelax import global_config
from gitrelax.llm import MissingAPIKeyError, resolve_provider_config
from gitrelax.llm.provider import mask_api_key

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global git-relax configuration in ~/.git-relax/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show current configuration and the provider the environment selects."""
    try:
        config = global_config.load_global_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Current git-relax configuration (~/.git-relax/config.yaml):")
    typer.echo()
    if global_config.is_configured():
        typer.echo(f"  Base branch: {config.get('base_branch', 'not set')}")
        typer.echo(f"  Timeout: {config.get('timeout', 'not set')}")
    else:
        typer.echo("  No config file. Defaults are in use.")
    typer.echo()

    try:
        provider_config = resolve_provider_config()
    except MissingAPIKeyError:
        typer.echo("  Provider: none (set OPENROUTER_API_KEY or OPENAI_API_KEY)")
        return

    typer.echo(f"  Provider: {provider_config.provider.value}")
    typer.echo(f"  Model: {provider_config.model}")
    typer.echo(f"  Endpoint: {provider_config.endpoint_url}")
    typer.echo(f"  API Key: {mask_api_key(provider_config.api_key)}")


@config_app.command("set-base")
def config_set_base(
    branch: str = typer.Argument(..., help="Default base branch for pull requests"),
) -> None:
    """Set the default base branch for pull requests."""
    try:
        global_config.set_base_branch(branch)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Base branch set to {branch}")


@config_app.command("set-timeout")
def config_set_timeout(
    seconds: float = typer.Argument(..., help="Request timeout in seconds"),
) -> None:
    """Set the timeout for LLM requests."""
    if seconds <= 0:
        typer.echo("Timeout must be greater than zero.", err=True)
        raise typer.Exit(1)

    try:
        global_config.set_timeout(seconds)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Timeout set to {seconds:g}s")
