"""Main entry point for the taskkeeper CLI."""

import typer

from taskkeeper import __version__
from taskkeeper.commands import config_command
from taskkeeper.commands.demo_command import demo
from taskkeeper.utils.ui.console import get_console

app = typer.Typer(
    name="taskkeeper",
    help="In-memory task tracking with work and personal tasks",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(config_command.app, name="config", help="Configuration management")
app.command("demo")(demo)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]taskkeeper[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
