"""Exportación HTML/PDF del catálogo.

Por qué está en adapters:
- PDF/HTML son detalles de infraestructura (WeasyPrint/Jinja2).
- El Core solo conoce el agregado `Catalog` y las reglas de `validate_catalog`.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from core.domain.language import Language
from core.domain.models import SECTION_ORDER, Catalog
from core.services.renderer import validate_catalog
from core.services.summary import build_summary


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
_TEMPLATES_DIR_FALLBACK = Path(__file__).resolve().parents[1] / "templates"


def _templates_dir() -> Path:
    return _TEMPLATES_DIR if _TEMPLATES_DIR.is_dir() else _TEMPLATES_DIR_FALLBACK


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_templates_dir())),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render_catalog_html(*, catalog: Catalog, language: Language = Language.ENGLISH) -> str:
    """Renderiza un HTML autocontenido del catálogo.

    Mismas garantías que el render Markdown: validación previa completa y
    salida determinista (sin fecha de generación).
    """

    validate_catalog(catalog)

    sections = [
        (language.heading(section.value), catalog.in_section(section))
        for section in SECTION_ORDER
        if catalog.in_section(section)
    ]

    template = _get_env().get_template("catalog.html")
    return template.render(
        catalog=catalog,
        lang=language.value,
        sections=sections,
        summary=build_summary(catalog),
        summary_heading=language.heading("summary"),
        advantages_heading=language.heading("advantages"),
    )


def export_catalog_html(
    *, catalog: Catalog, output_path: Path, language: Language = Language.ENGLISH
) -> Path:
    """Exporta el catálogo como HTML.

    Por qué existe:
    - Sirve como fallback cuando el render PDF no está soportado por el entorno.
    - Útil para depurar el contenido del documento y el template.
    """

    html = render_catalog_html(catalog=catalog, language=language)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    return output_path


def export_catalog_pdf(
    *, catalog: Catalog, output_path: Path, language: Language = Language.ENGLISH
) -> Path:
    """Exporta el catálogo como PDF.

    Diseño:
    - WeasyPrint se importa aquí: depende de librerías del sistema (Pango) y
      su ausencia no debe impedir el resto de formatos.
    """

    from weasyprint import HTML  # noqa: PLC0415

    html = render_catalog_html(catalog=catalog, language=language)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    HTML(string=html, base_url=str(_templates_dir())).write_pdf(str(output_path))
    return output_path
