"""Main CLI entry point for WordPress translation export."""

import typer
from rich.console import Console

from cli.commands import po

app = typer.Typer(
    name="wp-export",
    help="WordPress translation export tools",
    add_completion=False,
)

console = Console()

app.add_typer(po.app, name="po", help="Build and inspect PO export files")


@app.command()
def version():
    """Show version information."""
    from src.wp_export import __version__

    console.print(f"wp-export version {__version__}")


if __name__ == "__main__":
    app()
