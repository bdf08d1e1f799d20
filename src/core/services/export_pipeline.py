"""Catalog export orchestration.

This module keeps the format dispatch out of the CLI layer. The CLI builds an
`ExportRequest`, calls `run_export` and only deals with printing, which keeps
the pipeline reusable for other entry-points (tests, batch jobs) and keeps
side-effects other than writing the requested file out of the core logic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from adapters.json_exporter import export_catalog_json
from adapters.markdown_exporter import export_catalog_markdown
from adapters.report_exporter import export_catalog_html, export_catalog_pdf
from core.config import OutputFormat
from core.domain.language import Language
from core.domain.models import Catalog
from core.services.renderer import validate_catalog


logger = logging.getLogger(__name__)


@dataclass
class ExportRequest:
    """Parameters that control a single export."""

    catalog: Catalog
    output_path: Path
    fmt: OutputFormat = OutputFormat.MARKDOWN
    language: Language = Language.ENGLISH


@dataclass
class ExportResult:
    """Output of a pipeline invocation."""

    path: Path
    fmt: OutputFormat
    warnings: list[str] = field(default_factory=list)


def sanitize_title_for_filename(value: str) -> str:
    """Generate a filesystem-friendly slug for documents."""

    out: list[str] = []
    for ch in value.strip().lower():
        if ch.isalnum() or ch in ("-", "_", "."):
            out.append(ch)
        else:
            out.append("-")
    cleaned = "".join(out)
    while "--" in cleaned:
        cleaned = cleaned.replace("--", "-")
    cleaned = cleaned.strip("-_.")
    return cleaned or "catalogo"


def default_output_name(catalog: Catalog, fmt: OutputFormat) -> str:
    return sanitize_title_for_filename(catalog.title or "catalogo") + fmt.extension


def _export_json(request: ExportRequest) -> Path:
    return export_catalog_json(catalog=request.catalog, output_path=request.output_path)


def _export_markdown(request: ExportRequest) -> Path:
    return export_catalog_markdown(
        catalog=request.catalog, output_path=request.output_path, language=request.language
    )


def _export_html(request: ExportRequest) -> Path:
    return export_catalog_html(
        catalog=request.catalog, output_path=request.output_path, language=request.language
    )


def _export_pdf(request: ExportRequest) -> Path:
    return export_catalog_pdf(
        catalog=request.catalog, output_path=request.output_path, language=request.language
    )


_EXPORTERS: dict[OutputFormat, Callable[[ExportRequest], Path]] = {
    OutputFormat.MARKDOWN: _export_markdown,
    OutputFormat.HTML: _export_html,
    OutputFormat.JSON: _export_json,
}


def run_export(request: ExportRequest) -> ExportResult:
    """Write the catalog in the requested format.

    Catalog errors (`EmptyCatalogError`, `DuplicateNameError`, `RenderError`)
    propagate untouched. A PDF backend failure falls back to HTML next to the
    requested path and is reported as a warning.
    """

    validate_catalog(request.catalog)
    logger.info(
        "Exportando %d entradas como %s (%s) -> %s",
        len(request.catalog.entries),
        request.fmt.value,
        request.language.label(),
        request.output_path,
    )

    if request.fmt is not OutputFormat.PDF:
        path = _EXPORTERS[request.fmt](request)
        return ExportResult(path=path, fmt=request.fmt)

    try:
        path = _export_pdf(request)
        return ExportResult(path=path, fmt=OutputFormat.PDF)
    except (ImportError, OSError) as exc:
        logger.warning("Fallo al generar PDF, usando HTML: %s", exc)
        html_request = ExportRequest(
            catalog=request.catalog,
            output_path=request.output_path.with_suffix(OutputFormat.HTML.extension),
            fmt=OutputFormat.HTML,
            language=request.language,
        )
        path = _export_html(html_request)
        return ExportResult(
            path=path,
            fmt=OutputFormat.HTML,
            warnings=[f"PDF export failed ({exc}); wrote HTML instead."],
        )
