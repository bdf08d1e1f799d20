"""Resumen final del documento.

Cada entrada aporta una línea `nombre: primera cláusula`, en el orden original
del catálogo (no agrupado por sección).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from core.domain.models import Catalog, Section


_WHITESPACE = re.compile(r"\s+")
_CLAUSE_END = re.compile(r"[.!?](?=\s|$)")


def first_clause(text: str) -> str:
    """Devuelve el texto hasta el primer fin de oración, incluido.

    Ejemplos:
    - "Avoid duplication. It hurts." -> "Avoid duplication."
    - "v1.2 is out" -> "v1.2 is out" (el punto no va seguido de espacio)
    """

    normalized = _WHITESPACE.sub(" ", text).strip()
    match = _CLAUSE_END.search(normalized)
    if match is None:
        return normalized
    return normalized[: match.end()]


@dataclass(frozen=True)
class SummaryLine:
    name: str
    section: Section
    clause: str

    def as_text(self) -> str:
        return f"{self.name}: {self.clause}"


def build_summary(catalog: Catalog) -> list[SummaryLine]:
    """Una línea por entrada, en orden de catálogo."""

    return [
        SummaryLine(name=entry.name, section=entry.section, clause=first_clause(entry.summary))
        for entry in catalog.entries
    ]
