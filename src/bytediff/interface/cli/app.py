"""
CLI Orchestrator - Main Entry Point

Wires the command line onto the application layer:
- serve    run the HTTP API
- compare  diff two local files without storing anything
- submit   store a local file as one side of a case
- report   show the stored report of a case
- cases    list stored case names

Exit codes: 0 success / equal, 1 difference or not found or storage
failure, 2 invalid input.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from bytediff.application.comparison_engine import compare as compare_payloads
from bytediff.application.container import Container
from bytediff.domain.models import BinaryPayload, DiffSide, ReportStatus
from bytediff.domain.settings import ServiceSettings
from bytediff.infrastructure.config_loader import ConfigLoader, with_overrides
from bytediff.infrastructure.logging_config import setup_logging
from bytediff.interface.cli.formatters import ReportFormatter, console, display_case_names

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path("config")

EXIT_DIFFERENT = 1
EXIT_USAGE = 2

app = typer.Typer(
    name="bytediff",
    help="🔍 Binary diff service - compare two payloads submitted under one case name",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True
)


def _load_settings(config_dir: Path, **overrides) -> ServiceSettings:
    """Load settings from the config dir and apply CLI overrides."""
    try:
        settings = ConfigLoader(config_dir).load_settings()
        return with_overrides(settings, **overrides)
    except ValueError as e:
        console.print(f"[red]❌ Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_USAGE)


def _read_payload(path: Path) -> BinaryPayload:
    try:
        return BinaryPayload.of(path.read_bytes())
    except OSError as e:
        console.print(f"[red]❌ Cannot read {escape(str(path))}:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_USAGE)


@app.command("serve")
def serve_command(
    config_dir: Path = typer.Option(DEFAULT_CONFIG_DIR, "--config-dir", help="Directory holding service_settings.json"),
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to listen on"),
    db: Optional[Path] = typer.Option(None, "--db", help="SQLite database file"),
    memory: bool = typer.Option(False, "--memory", help="Keep cases in memory only"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to file"),
):
    """
    Run the HTTP API.

    Cases submitted over HTTP are kept in the configured store and can be
    inspected afterwards with the report and cases commands.
    """
    settings = _load_settings(
        config_dir,
        host=host,
        port=port,
        database_path=str(db) if db else None,
        storage_backend="memory" if memory else None,
        log_level="DEBUG" if verbose else None,
        log_file=log_file,
    )
    setup_logging(settings.log_level_value, settings.log_file)

    # Imported here so the other commands do not pay for Flask
    from bytediff.interface.api.app import create_app

    container = Container(settings)
    try:
        api = create_app(container.coordinator, settings.max_request_bytes)
        logger.info("Serving diff API on http://%s:%d", settings.host, settings.port)
        api.run(host=settings.host, port=settings.port, threaded=True)
    finally:
        container.close()


@app.command("compare")
def compare_command(
    left: Path = typer.Argument(..., help="Left side file"),
    right: Path = typer.Argument(..., help="Right side file"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
):
    """
    Diff two local files byte by byte.

    Exits with 0 when the files are equal and 1 otherwise.
    """
    report = compare_payloads(_read_payload(left), _read_payload(right))
    formatter = ReportFormatter()
    if as_json:
        typer.echo(formatter.report_json(report))
    else:
        formatter.display_report(report, title=f"{left} ↔ {right}")

    if report.status is not ReportStatus.EQUAL:
        raise typer.Exit(EXIT_DIFFERENT)


@app.command("submit")
def submit_command(
    name: str = typer.Argument(..., help="Case name"),
    side: str = typer.Argument(..., help="left or right"),
    file: Path = typer.Argument(..., help="File holding the side's data"),
    config_dir: Path = typer.Option(DEFAULT_CONFIG_DIR, "--config-dir", help="Directory holding service_settings.json"),
    db: Optional[Path] = typer.Option(None, "--db", help="SQLite database file"),
):
    """Store a local file as one side of a diff case."""
    diff_side = DiffSide.from_string(side)
    if diff_side is None:
        console.print(f"[red]❌ Error:[/red] side must be 'left' or 'right', got {escape(side)!r}")
        raise typer.Exit(EXIT_USAGE)

    payload = _read_payload(file)
    settings = _load_settings(config_dir, database_path=str(db) if db else None)
    container = Container(settings)
    try:
        case = container.coordinator.submit_side(name, diff_side, payload)
    except Exception as e:
        logger.exception("Submit failed for case '%s': %s", name, e)
        console.print(f"[red]❌ Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_DIFFERENT)
    finally:
        container.close()

    console.print(
        f"[green]✅ {escape(name)}[/green]: {diff_side.value} side stored "
        f"({payload.length} bytes) -> {case.report.status.value}"
    )


@app.command("report")
def report_command(
    name: str = typer.Argument(..., help="Case name"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    config_dir: Path = typer.Option(DEFAULT_CONFIG_DIR, "--config-dir", help="Directory holding service_settings.json"),
    db: Optional[Path] = typer.Option(None, "--db", help="SQLite database file"),
):
    """Show the stored report of a diff case."""
    settings = _load_settings(config_dir, database_path=str(db) if db else None)
    container = Container(settings)
    try:
        report = container.coordinator.get_report(name)
    except Exception as e:
        logger.exception("Report lookup failed for case '%s': %s", name, e)
        console.print(f"[red]❌ Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_DIFFERENT)
    finally:
        container.close()

    if report is None:
        console.print(f"[yellow]⚠️  No diff case named {escape(name)!r}[/yellow]")
        raise typer.Exit(EXIT_DIFFERENT)

    formatter = ReportFormatter()
    if as_json:
        typer.echo(formatter.report_json(report))
    else:
        formatter.display_report(report, title=name)


@app.command("cases")
def cases_command(
    config_dir: Path = typer.Option(DEFAULT_CONFIG_DIR, "--config-dir", help="Directory holding service_settings.json"),
    db: Optional[Path] = typer.Option(None, "--db", help="SQLite database file"),
):
    """List stored diff case names."""
    settings = _load_settings(config_dir, database_path=str(db) if db else None)
    container = Container(settings)
    try:
        names = container.case_store.list_names()
    except Exception as e:
        logger.exception("Listing cases failed: %s", e)
        console.print(f"[red]❌ Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_DIFFERENT)
    finally:
        container.close()
    display_case_names(names)


def main() -> None:
    """Console script entry point."""
    app()
