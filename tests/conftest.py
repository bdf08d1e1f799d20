from __future__ import annotations

import pytest

from core.domain.models import Catalog, CatalogEntry, CodeExample, Section


def make_entry(name: str, section: Section = Section.PRINCIPLE, **kwargs) -> CatalogEntry:
    kwargs.setdefault("summary", f"{name} summary.")
    return CatalogEntry(name=name, section=section, **kwargs)


@pytest.fixture
def dry_catalog() -> Catalog:
    return Catalog(
        entries=(
            CatalogEntry(
                name="DRY",
                section=Section.PRINCIPLE,
                summary="Avoid duplication.",
                advantages=("Less code",),
            ),
        )
    )


@pytest.fixture
def factory_catalog() -> Catalog:
    return Catalog(
        entries=(
            CatalogEntry(
                name="Factory",
                section=Section.PATTERN,
                summary="Centralizes object creation.",
                examples=(
                    CodeExample(caption="Car factory", code="const car = make('car');", language="javascript"),
                ),
            ),
        )
    )


@pytest.fixture
def mixed_catalog() -> Catalog:
    # Patrones y principios intercalados a propósito.
    return Catalog(
        title="Design",
        entries=(
            make_entry("Observer", Section.PATTERN, summary="Notifies subscribers. Uses events."),
            make_entry("KISS", summary="Keep it simple! Really."),
            make_entry("Strategy", Section.PATTERN),
            make_entry("YAGNI", advantages=("Less waste", "Faster delivery")),
        ),
    )
