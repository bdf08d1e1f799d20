from __future__ import annotations

import pytest

from core.config import OutputFormat
from core.domain.errors import DuplicateNameError
from core.domain.models import Catalog
from core.services import export_pipeline
from core.services.export_pipeline import (
    ExportRequest,
    default_output_name,
    run_export,
    sanitize_title_for_filename,
)


@pytest.mark.parametrize("fmt", [OutputFormat.MARKDOWN, OutputFormat.HTML, OutputFormat.JSON])
def test_run_export_writes_requested_format(tmp_path, mixed_catalog, fmt):
    target = tmp_path / f"doc{fmt.extension}"

    result = run_export(ExportRequest(catalog=mixed_catalog, output_path=target, fmt=fmt))

    assert result.path == target
    assert result.fmt is fmt
    assert result.warnings == []
    assert target.read_text(encoding="utf-8")


def test_catalog_errors_propagate(tmp_path, dry_catalog):
    catalog = Catalog(entries=dry_catalog.entries * 2)

    with pytest.raises(DuplicateNameError):
        run_export(ExportRequest(catalog=catalog, output_path=tmp_path / "x.json", fmt=OutputFormat.JSON))
    assert not (tmp_path / "x.json").exists()


def test_pdf_failure_falls_back_to_html(tmp_path, monkeypatch, dry_catalog):
    def broken_pdf(request):
        raise OSError("cannot load library 'pango-1.0-0'")

    monkeypatch.setattr(export_pipeline, "_export_pdf", broken_pdf)

    result = run_export(
        ExportRequest(catalog=dry_catalog, output_path=tmp_path / "doc.pdf", fmt=OutputFormat.PDF)
    )

    assert result.fmt is OutputFormat.HTML
    assert result.path == tmp_path / "doc.html"
    assert result.path.is_file()
    assert "pango" in result.warnings[0]


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Principios y patrones", "principios-y-patrones"),
        ("  A / B  ", "a-b"),
        ("???", "catalogo"),
    ],
)
def test_sanitize_title_for_filename(title, expected):
    assert sanitize_title_for_filename(title) == expected


def test_default_output_name(dry_catalog, mixed_catalog):
    assert default_output_name(dry_catalog, OutputFormat.MARKDOWN) == "catalogo.md"
    assert default_output_name(mixed_catalog, OutputFormat.PDF) == "design.pdf"
