"""PO commands for building and inspecting translation export files."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer()
console = Console()


@app.command("build")
def build_export(
    input_file: Path = typer.Argument(..., help="JSON file with the strings to export"),
    source: str = typer.Option(..., "--source", "-s", help="Source locale (e.g. 'en_US')"),
    target: str = typer.Option(..., "--target", "-t", help="Target locale (e.g. 'fr_FR')"),
    site_url: Optional[str] = typer.Option(
        None,
        "--site-url",
        help="Site base URL written to the X-Polylang-Site-Reference header",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file or directory (defaults to the current directory)",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with export settings",
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write log records to this file",
    ),
):
    """Build a PO export file from a list of strings.

    The input holds a JSON list of objects with ``ref``, ``source`` and an
    optional ``target`` key.
    """
    from src.wp_export.export import Language, POExport
    from src.wp_export.utils.config_loader import ExportConfig
    from src.wp_export.utils.logging import setup_logging

    setup_logging(level=log_level, log_file=log_file)

    if not input_file.exists():
        console.print(f"[red]Input file not found: {input_file}[/red]")
        raise typer.Exit(1)

    try:
        items = json.loads(input_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {input_file}: {e}[/red]")
        raise typer.Exit(1)

    if not isinstance(items, list):
        console.print("[red]Input must be a JSON list of entries[/red]")
        raise typer.Exit(1)

    for index, item in enumerate(items):
        problem = _entry_problem(item)
        if problem:
            console.print(f"[red]Invalid entry #{index} in {input_file}: {problem}[/red]")
            raise typer.Exit(1)

    config = ExportConfig.from_yaml(config_file.resolve()) if config_file else ExportConfig()

    export = POExport(
        source_language=Language(slug=source.split("_")[0], locale=source),
        target_language=Language(slug=target.split("_")[0], locale=target),
        site_url=site_url,
        config=config,
    )

    for item in items:
        export.add_translation_entry(
            item.get("ref", {}),
            item.get("source", ""),
            item.get("target", ""),
        )

    output_path = export.save(output or Path.cwd())

    console.print(
        f"\n[bold green]Exported {export.entry_count} entries "
        f"({len(items) - export.entry_count} skipped) to {output_path}[/bold green]"
    )


def _entry_problem(item) -> Optional[str]:
    """Describe what is wrong with an input entry, or None if it is usable."""
    if not isinstance(item, dict):
        return "expected an object"
    if not isinstance(item.get("ref", {}), dict):
        return "'ref' must be an object"
    for key in ("source", "target"):
        if not isinstance(item.get(key, ""), str):
            return f"'{key}' must be a string"
    return None


@app.command("inspect")
def inspect_file(
    po_file: Path = typer.Argument(..., help="PO file to inspect"),
):
    """Show headers and statistics of a PO file."""
    import polib

    if not po_file.exists():
        console.print(f"[red]File not found: {po_file}[/red]")
        raise typer.Exit(1)

    po = polib.pofile(str(po_file))

    console.print(f"\n[bold]PO File: {po_file}[/bold]\n")

    if po.header:
        for line in po.header.splitlines():
            console.print(f"  [dim]# {line}[/dim]")
        console.print()

    table = Table(show_header=True, header_style="bold")
    table.add_column("Header")
    table.add_column("Value")

    for name, value in po.ordered_metadata():
        table.add_row(name, value)

    console.print(table)

    console.print(f"\n  Total entries: {len(po)}")
    console.print(f"  Translated: {len(po.translated_entries())}")
    console.print(f"  Untranslated: {len(po.untranslated_entries())}")
    console.print(f"  Percent translated: {po.percent_translated()}%")
