"""CLI principal (Typer).

Por qué Typer:
- Tipado de opciones (Enum/Path) sin parsers manuales.
- Subcomandos (`doctor`) montados como apps independientes.

La CLI es solo pegamento: elige el catálogo de entrada y el destino, delega el
render en el Core y presenta errores con Rich.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.catalog_loader import load_catalog
from adapters.json_exporter import dump_catalog_json
from adapters.report_exporter import render_catalog_html
from cli import doctor
from cli.ui_components import build_error_panel, build_summary_table, print_banner
from core.config import AppSettings, OutputFormat
from core.domain.errors import CatalogError, CatalogLoadError
from core.domain.language import Language
from core.domain.models import Catalog
from core.resources_loader import load_default_catalog
from core.services.export_pipeline import ExportRequest, default_output_name, run_export
from core.services.renderer import render, validate_catalog
from core.services.summary import build_summary

app = typer.Typer(
    no_args_is_help=True,
    help="Render a catalog of design principles and patterns into a document.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _resolve_catalog(path: Path | None, settings: AppSettings) -> Catalog:
    source = path or settings.catalog_path
    if source is None:
        logger.debug("Usando el catálogo incluido")
        return load_default_catalog()
    return load_catalog(source)


def _fail(exc: CatalogError) -> NoReturn:
    _err_console.print(build_error_panel(exc))
    raise typer.Exit(code=2 if isinstance(exc, CatalogLoadError) else 1)


def _string_document(catalog: Catalog, fmt: OutputFormat, language: Language) -> str:
    if fmt is OutputFormat.MARKDOWN:
        return render(catalog, language=language)
    if fmt is OutputFormat.HTML:
        return render_catalog_html(catalog=catalog, language=language)
    validate_catalog(catalog)
    return dump_catalog_json(catalog)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    _configure_logging(verbose)


@app.command("render")
def render_command(
    catalog_path: Optional[Path] = typer.Argument(
        None, help="Catalog JSON file. Defaults to CATALOGO_CATALOG_PATH or the bundled catalog."
    ),
    fmt: Optional[OutputFormat] = typer.Option(None, "--format", "-f", help="Output format."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Destination file."),
    lang: Optional[Language] = typer.Option(None, "--lang", "-l", help="Heading language."),
    stdout: bool = typer.Option(False, "--stdout", help="Print the document instead of writing a file."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide the banner."),
) -> None:
    """Render the catalog to Markdown, HTML, PDF or JSON."""

    settings = AppSettings()
    fmt = fmt or settings.default_format
    language = lang or settings.default_language

    if stdout and fmt is OutputFormat.PDF:
        raise typer.BadParameter("PDF can not be written to stdout", param_hint="--format")

    try:
        catalog = _resolve_catalog(catalog_path, settings)
        if stdout:
            typer.echo(_string_document(catalog, fmt, language), nl=False)
            return

        if not quiet:
            print_banner(_console)

        output_path = output or settings.output_dir / default_output_name(catalog, fmt)
        result = run_export(
            ExportRequest(catalog=catalog, output_path=output_path, fmt=fmt, language=language)
        )
    except CatalogError as exc:
        _fail(exc)

    for warning in result.warnings:
        _console.print(f"[yellow]Warning:[/yellow] {warning}")
    _console.print(f"[green]Saved {result.fmt.value} to:[/green] {result.path}")


@app.command()
def validate(
    catalog_path: Optional[Path] = typer.Argument(None, help="Catalog JSON file."),
) -> None:
    """Check catalog invariants without writing anything."""

    settings = AppSettings()
    try:
        catalog = _resolve_catalog(catalog_path, settings)
        validate_catalog(catalog)
    except CatalogError as exc:
        _fail(exc)

    _console.print(f"[green]OK[/green] {len(catalog.entries)} entries")


@app.command()
def summary(
    catalog_path: Optional[Path] = typer.Argument(None, help="Catalog JSON file."),
    lang: Optional[Language] = typer.Option(None, "--lang", "-l", help="Heading language."),
) -> None:
    """Show one line per entry (name, section, first clause)."""

    settings = AppSettings()
    language = lang or settings.default_language
    try:
        catalog = _resolve_catalog(catalog_path, settings)
        validate_catalog(catalog)
    except CatalogError as exc:
        _fail(exc)

    _console.print(build_summary_table(build_summary(catalog), language))


def run() -> None:
    app()
