"""Command-line interface for SheetPick."""
import asyncio
from pathlib import Path
from typing import Optional
import logging

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from sheetpick.config import Config, get_config, set_config
from sheetpick.errors import SheetPickError
from sheetpick.extract import SUMMARY_CELLS
from sheetpick.session import ExtractionSession
from sheetpick.summary import format_summary


app = typer.Typer(
    name="sheetpick",
    help="Decrypt spreadsheets, pick columns and export them",
    no_args_is_help=True,
)
console = Console()


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_session(file: Path, config_path: Optional[Path]) -> ExtractionSession:
    """Load a file into a fresh session, exiting on failure."""
    if config_path:
        set_config(Config.load(config_path))

    if not file.exists():
        console.print(f"[red]File not found: {file}[/red]")
        raise typer.Exit(1)

    session = ExtractionSession()
    try:
        asyncio.run(session.load_path(file))
    except SheetPickError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    return session


def print_summary(session: ExtractionSession):
    display = format_summary(session.summary)

    table = Table(title="Summary")
    table.add_column("Cell", style="cyan")
    table.add_column("Value", style="green", justify="right")
    for coord in SUMMARY_CELLS:
        table.add_row(coord, display[coord.lower()])
    table.add_row("F24+F25", display["f"])
    table.add_row("G24+G25", display["g"])
    table.add_row("P24+P25", display["p"])

    console.print(table)


@app.command()
def inspect(
    file: Path = typer.Argument(..., help="Spreadsheet to read"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Preview rows"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Show the columns and first rows of a spreadsheet."""
    setup_logging(verbose)
    session = load_session(file, config_path)
    store = session.store

    console.print(f"\n[bold]{session.filename}[/bold]  [dim]{session.mode} mode[/dim]  "
                  f"{store.dataset.row_count} rows\n")

    console.print("[bold]Columns:[/bold]")
    for column in store.columns():
        console.print(f"  [cyan]{column['index']:>3}[/cyan]  {column['name']!s}")

    view = store.preview(limit)
    table = Table(title=f"Preview ({len(view)} of {store.dataset.row_count} rows)")
    for header in view.headers:
        table.add_column(str(header))
    for row in view:
        table.add_row(*("" if v is None else str(v) for v in row))
    console.print()
    console.print(table)

    if session.summary is not None:
        console.print()
        print_summary(session)


@app.command()
def export(
    file: Path = typer.Argument(..., help="Spreadsheet to read"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output .xlsx path"),
    columns: Optional[list[int]] = typer.Option(None, "--column", "-k", help="Column index to keep (repeatable)"),
    exclude: Optional[list[int]] = typer.Option(None, "--exclude", "-x", help="Column index to drop (repeatable)"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Export selected columns to a new spreadsheet.

    All columns are kept unless --column narrows the selection; --exclude
    then drops columns from it. Indices are shown by `sheetpick inspect`.
    """
    setup_logging(verbose)
    session = load_session(file, config_path)
    store = session.store

    try:
        if columns:
            store.deselect_all()
            for index in columns:
                store.toggle(index, True)
        for index in exclude or []:
            store.toggle(index, False)
        content = session.export()
    except IndexError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except SheetPickError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)

    if output is None:
        output = Path(session.config.export.filename)
    output.write_bytes(content)

    console.print(f"[green]✓ Exported {len(store.selection)} columns, "
                  f"{store.dataset.row_count} rows: {output}[/green]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Start the web server."""
    setup_logging(verbose)
    if config_path:
        set_config(Config.load(config_path))

    import uvicorn

    cfg = get_config()
    host = host or cfg.api.host
    port = port or cfg.api.port

    console.print(f"\n[bold]Starting SheetPick server at http://{host}:{port}[/bold]\n")
    console.print(f"API docs: http://{host}:{port}/docs")
    console.print("Press Ctrl+C to stop\n")

    uvicorn.run(
        "sheetpick.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.command()
def config(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config file path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Show configuration."""
    setup_logging(verbose)
    if config_path:
        set_config(Config.load(config_path))

    cfg = get_config()

    console.print(Panel.fit("[bold]SheetPick Configuration[/bold]"))
    console.print(f"\nDecrypt password: {'*' * len(cfg.decrypt.password)}")
    console.print(f"Summary sheet: {cfg.summary.sheet_name}")
    console.print(f"Summary labels: {', '.join(cfg.summary.row_labels)}, {cfg.summary.total_label}")
    console.print(f"Preview rows: {cfg.preview.row_limit}")
    console.print(f"\nExport sheet: {cfg.export.sheet_title}")
    console.print(f"Export file: {cfg.export.filename}")
    console.print(f"\nAPI: http://{cfg.api.host}:{cfg.api.port}")
    console.print(f"Max upload: {cfg.api.max_upload_mb} MB")


if __name__ == "__main__":
    app()
