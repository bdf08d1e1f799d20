"""Doctor command for environment diagnostics."""

from __future__ import annotations

import tempfile
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.report_exporter import export_catalog_pdf, render_catalog_html
from core.config import AppSettings
from core.domain.models import Catalog, CatalogEntry, Section
from core.resources_loader import default_catalog_path, load_default_catalog

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_PROBE_CATALOG = Catalog(
    entries=(CatalogEntry(name="doctor", section=Section.PRINCIPLE, summary="Probe."),),
)


def _check_catalog() -> tuple[bool, str]:
    try:
        catalog = load_default_catalog()
        return True, f"{len(catalog.entries)} entries ({default_catalog_path().name})"
    except Exception as exc:
        return False, str(exc)


def _check_template() -> tuple[bool, str]:
    try:
        render_catalog_html(catalog=_PROBE_CATALOG)
        return True, "OK"
    except Exception as exc:
        return False, str(exc)


def _check_pdf() -> tuple[bool, str]:
    """Attempt to generate a minimal PDF to detect WeasyPrint issues."""

    try:
        with tempfile.TemporaryDirectory() as tmp:
            export_catalog_pdf(catalog=_PROBE_CATALOG, output_path=Path(tmp) / "_doctor_test.pdf")
        return True, "OK"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Catálogo Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("Format", "OK", settings.default_format.value)
    table.add_row("Output dir", "OK", str(settings.output_dir))
    if settings.catalog_path is None:
        table.add_row("Catalog path", "DEFAULT", "Bundled catalog")
    elif settings.catalog_path.is_file():
        table.add_row("Catalog path", "OK", str(settings.catalog_path))
    else:
        table.add_row("Catalog path", "FAIL", f"Not found: {settings.catalog_path}")

    ok_catalog, detail_catalog = _check_catalog()
    table.add_row("Bundled catalog", "OK" if ok_catalog else "FAIL", detail_catalog)

    ok_template, detail_template = _check_template()
    table.add_row("Jinja2 template", "OK" if ok_template else "FAIL", detail_template)

    ok_pdf, detail_pdf = _check_pdf()
    table.add_row("WeasyPrint PDF", "OK" if ok_pdf else "FAIL", detail_pdf)

    _console.print(table)

    if not ok_pdf:
        _console.print(
            "\n[yellow]Note:[/yellow] When PDF export fails, `--format pdf` automatically falls back to HTML."
        )
