"""Main entry point for the taskmirror CLI."""

import typer

from taskmirror import __version__
from taskmirror.commands import config, tasks
from taskmirror.utils.ui.console import get_console

app = typer.Typer(
    name="taskmirror",
    help="Tasks mirrored between a local store and a remote service",
    no_args_is_help=True,
)

console = get_console()

app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]taskmirror[/bold] version [header]{__version__}[/header]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
