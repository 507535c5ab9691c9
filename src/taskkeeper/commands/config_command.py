"""Configuration management commands."""

import json

import typer

from taskkeeper.services.config_service import get_config_service
from taskkeeper.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from taskkeeper.utils.ui.console import get_console
from taskkeeper.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the current configuration."""
    config = get_config_service().config
    console.print_json(json.dumps(config.model_dump()))


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get_value(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., output.format)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set_value(key, value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    except ValueError as e:
        raise AppError(str(e), ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Are you sure you want to reset the configuration?"):
        raise typer.Exit(0)
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
