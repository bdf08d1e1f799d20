"""Escritura del documento Markdown producido por el renderer."""

from __future__ import annotations

from pathlib import Path

from core.domain.language import Language
from core.domain.models import Catalog
from core.services.renderer import render


def export_catalog_markdown(
    *, catalog: Catalog, output_path: Path, language: Language = Language.ENGLISH
) -> Path:
    # Se renderiza antes de tocar el disco: un catálogo inválido no deja archivo.
    document = render(catalog, language=language)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(document, encoding="utf-8", newline="\n")
    return output_path
