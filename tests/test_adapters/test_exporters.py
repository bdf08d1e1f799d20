from __future__ import annotations

import json
import re
import sys
import types

import pytest

from adapters.catalog_loader import load_catalog
from adapters.json_exporter import export_catalog_json
from adapters.markdown_exporter import export_catalog_markdown
from adapters.report_exporter import export_catalog_html, export_catalog_pdf, render_catalog_html
from core.domain.errors import EmptyCatalogError
from core.domain.language import Language
from core.domain.models import Catalog, CatalogEntry, Section
from core.services.renderer import render


def test_markdown_export_writes_render_output(tmp_path, mixed_catalog):
    target = tmp_path / "out" / "doc.md"

    export_catalog_markdown(catalog=mixed_catalog, output_path=target, language=Language.SPANISH)

    assert target.read_text(encoding="utf-8") == render(mixed_catalog, language=Language.SPANISH)


def test_markdown_export_leaves_no_file_on_error(tmp_path):
    target = tmp_path / "doc.md"

    with pytest.raises(EmptyCatalogError):
        export_catalog_markdown(catalog=Catalog(), output_path=target)
    assert not target.exists()


def test_json_export_round_trips_through_loader(tmp_path, mixed_catalog):
    target = export_catalog_json(catalog=mixed_catalog, output_path=tmp_path / "catalog.json")

    text = target.read_text(encoding="utf-8")
    assert json.loads(text)["title"] == "Design"
    assert load_catalog(target) == mixed_catalog


def test_html_contains_sections_examples_and_summary(factory_catalog):
    html = render_catalog_html(catalog=factory_catalog)

    assert "<h2>Patterns</h2>" in html
    assert "<h3>Factory</h3>" in html
    assert "<figcaption>Car factory</figcaption>" in html
    assert 'class="language-javascript"' in html
    assert "const car = make(&#39;car&#39;);" in html
    assert "<strong>Factory</strong>: Centralizes object creation." in html
    assert "<ul aria-label" not in html


def test_html_is_deterministic_and_ordered(mixed_catalog):
    html = render_catalog_html(catalog=mixed_catalog, language=Language.SPANISH)

    assert html == render_catalog_html(catalog=mixed_catalog, language=Language.SPANISH)
    assert html.index("<h2>Principios</h2>") < html.index("<h2>Patrones</h2>")
    assert html.index("<h3>KISS</h3>") < html.index("<h3>YAGNI</h3>")
    assert html.count("<hr>") == 2


def test_html_validates_first(tmp_path):
    with pytest.raises(EmptyCatalogError):
        export_catalog_html(catalog=Catalog(), output_path=tmp_path / "x.html")


def test_pdf_export_uses_weasyprint(tmp_path, monkeypatch, dry_catalog):
    calls = {}

    class FakeHTML:
        def __init__(self, *, string, base_url):
            calls["html"] = string
            calls["base_url"] = base_url

        def write_pdf(self, target):
            calls["target"] = target

    monkeypatch.setitem(sys.modules, "weasyprint", types.SimpleNamespace(HTML=FakeHTML))

    target = export_catalog_pdf(catalog=dry_catalog, output_path=tmp_path / "pdf" / "doc.pdf")

    assert calls["target"] == str(target)
    assert "<h3>DRY</h3>" in calls["html"]
    assert target.parent.is_dir()


def test_html_ids_are_unique_for_similar_names():
    catalog = Catalog(
        entries=(
            CatalogEntry(name="DRY", section=Section.PRINCIPLE, summary="Upper."),
            CatalogEntry(name="dry", section=Section.PRINCIPLE, summary="Lower."),
            CatalogEntry(name="Dry", section=Section.PATTERN, summary="Mixed."),
        )
    )

    html = render_catalog_html(catalog=catalog)

    ids = re.findall(r'<article id="([^"]+)"', html)
    assert ids == ["principle-1", "principle-2", "pattern-1"]
