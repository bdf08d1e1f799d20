"""Render determinista de un `Catalog` a Markdown.

Reglas de diseño:
- Función pura: sin reloj, sin globals, sin I/O. Misma entrada, mismos bytes.
- Fail-fast: se valida todo el catálogo antes de producir una sola línea, así
  que nunca se devuelve documentación parcial.
- Orden fijo de secciones (principios, luego patrones); dentro de cada una se
  respeta el orden de inserción.
"""

from __future__ import annotations

import re

from core.domain.errors import DuplicateNameError, EmptyCatalogError, RenderError
from core.domain.language import Language
from core.domain.models import SECTION_ORDER, Catalog, CatalogEntry, CodeExample
from core.services.summary import build_summary


SEPARATOR = "---"

_LANGUAGE_TAG = re.compile(r"[A-Za-z0-9_+#.-]+")
_BACKTICK_RUN = re.compile(r"`+")


def _check_single_line(entry: CatalogEntry, value: str, label: str) -> None:
    # Va en una sola línea Markdown (encabezado, bullet, caption).
    if value != value.strip() or "\n" in value or "\r" in value:
        raise RenderError(entry.name, f"{label} debe ser una sola línea sin espacios en los extremos")


def _validate_example(entry: CatalogEntry, index: int, example: CodeExample) -> None:
    label = f"ejemplo #{index + 1}"
    if not example.caption.strip():
        raise RenderError(entry.name, f"{label} sin caption")
    _check_single_line(entry, example.caption, f"caption del {label}")
    if not example.language.strip():
        raise RenderError(entry.name, f"{label} sin lenguaje")
    if not _LANGUAGE_TAG.fullmatch(example.language):
        raise RenderError(entry.name, f"{label} con lenguaje inválido: {example.language!r}")
    if not example.code.strip():
        raise RenderError(entry.name, f"{label} sin código")


def _validate_entry(entry: CatalogEntry) -> None:
    if not entry.name.strip():
        raise RenderError(entry.name, "nombre vacío")
    _check_single_line(entry, entry.name, "nombre")
    if not entry.summary.strip():
        raise RenderError(entry.name, "summary vacío")
    for position, advantage in enumerate(entry.advantages, start=1):
        if not advantage.strip():
            raise RenderError(entry.name, f"ventaja #{position} vacía")
        _check_single_line(entry, advantage, f"ventaja #{position}")
    for index, example in enumerate(entry.examples):
        _validate_example(entry, index, example)


def validate_catalog(catalog: Catalog) -> None:
    """Comprueba los invariantes del catálogo antes de renderizar.

    Orden de comprobación: vacío, nombres duplicados, entradas malformadas.
    """

    if not catalog.entries:
        raise EmptyCatalogError()

    seen: set[str] = set()
    for name in catalog.names():
        if name in seen:
            raise DuplicateNameError(name)
        seen.add(name)

    for entry in catalog.entries:
        _validate_entry(entry)


def _fence_for(code: str) -> str:
    # El fence debe ser más largo que cualquier racha de backticks del código.
    longest = max((len(run) for run in _BACKTICK_RUN.findall(code)), default=0)
    return "`" * max(3, longest + 1)


def _paragraph(text: str) -> list[str]:
    return [line.rstrip() for line in text.strip().splitlines()]


def _render_example(example: CodeExample) -> list[str]:
    fence = _fence_for(example.code)
    lines = [f"**{example.caption}**", ""]
    lines.append(f"{fence}{example.language}")
    lines.extend(line.rstrip() for line in example.code.strip("\n").splitlines())
    lines.append(fence)
    return lines


def _render_entry(entry: CatalogEntry) -> list[str]:
    lines = [f"### {entry.name}", ""]
    lines.extend(_paragraph(entry.summary))

    if entry.advantages:
        lines.append("")
        lines.extend(f"- {advantage}" for advantage in entry.advantages)

    for example in entry.examples:
        lines.append("")
        lines.extend(_render_example(example))
    return lines


def _join_blocks(blocks: list[list[str]]) -> str:
    return "\n\n".join("\n".join(block) for block in blocks if block)


def render(catalog: Catalog, *, language: Language = Language.ENGLISH) -> str:
    """Transforma el catálogo en un único documento Markdown.

    Lanza `EmptyCatalogError`, `DuplicateNameError` o `RenderError` antes de
    emitir nada si el catálogo no es renderizable.
    """

    validate_catalog(catalog)

    blocks: list[list[str]] = []
    title = " ".join((catalog.title or "").split())
    if title:
        blocks.append([f"# {title}"])

    for section in SECTION_ORDER:
        entries = catalog.in_section(section)
        if not entries:
            continue
        blocks.append([f"## {language.heading(section.value)}"])
        for position, entry in enumerate(entries):
            if position:
                blocks.append([SEPARATOR])
            blocks.append(_render_entry(entry))

    summary_lines = [f"- {line.as_text()}" for line in build_summary(catalog)]
    blocks.append([f"## {language.heading('summary')}"])
    blocks.append(summary_lines)

    return _join_blocks(blocks) + "\n"
