from __future__ import annotations

from core.domain.language import Language
from core.domain.models import Section
from core.resources_loader import default_catalog_path, load_default_catalog
from core.services.renderer import render, validate_catalog


def test_bundled_catalog_is_valid():
    assert default_catalog_path().is_file()

    catalog = load_default_catalog()
    validate_catalog(catalog)

    assert [e.name for e in catalog.in_section(Section.PRINCIPLE)] == ["DRY", "KISS", "YAGNI"]
    assert len(catalog.in_section(Section.PATTERN)) == 6


def test_bundled_catalog_renders_in_spanish():
    document = render(load_default_catalog(), language=Language.SPANISH)

    assert document.startswith("# Principios y patrones de diseño de software\n")
    assert "## Patrones\n" in document
    assert "- Singleton Pattern: Garantiza que una clase tenga una única instancia" in document
