"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `frozen=True` garantiza que el catálogo no cambia durante un render.

Nota:
- Estos modelos describen *qué* se documenta, no *cómo* se presenta. Las
  reglas de formato (código vacío, lenguaje inválido) las aplica el renderer.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Section(str, Enum):
    """Grupo al que pertenece una entrada. El orden de declaración es el de render."""

    PRINCIPLE = "principle"
    PATTERN = "pattern"


SECTION_ORDER: tuple[Section, ...] = (Section.PRINCIPLE, Section.PATTERN)


class CodeExample(BaseModel):
    """Fragmento de código ilustrativo adjunto a una entrada."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    caption: str = Field(
        ...,
        description="Título corto mostrado sobre el bloque de código.",
    )
    code: str = Field(
        ...,
        description="Código fuente del ejemplo, tal cual se mostrará.",
    )
    language: str = Field(
        ...,
        description="Etiqueta de lenguaje del bloque (p.ej. 'javascript').",
    )


class CatalogEntry(BaseModel):
    """Un principio o patrón con su contenido explicativo.

    Por qué tuplas:
    - El orden de `advantages` y `examples` es parte del documento y no debe
      poder alterarse después de construir la entrada.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        ...,
        min_length=1,
        max_length=128,
        description="Título visible (p.ej. 'Factory Pattern'). Único en el catálogo.",
    )
    section: Section = Field(
        ...,
        description="Principio o patrón.",
    )
    summary: str = Field(
        ...,
        max_length=20_000,
        description="Párrafo explicativo. Su primera cláusula alimenta el resumen final.",
    )
    advantages: tuple[str, ...] = Field(
        default=(),
        description="Ventajas en orden de presentación (puede estar vacío).",
    )
    examples: tuple[CodeExample, ...] = Field(
        default=(),
        description="Ejemplos de código en orden de presentación (puede estar vacío).",
    )


class Catalog(BaseModel):
    """Agregado principal: la colección ordenada de entradas a documentar.

    Por qué un valor inmutable y no un registro global:
    - El render es una función pura de `entries`; el orden de inserción es el
      orden del documento.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entries: tuple[CatalogEntry, ...] = Field(
        default=(),
        description="Entradas en orden estable de inserción.",
    )
    title: str | None = Field(
        default=None,
        max_length=256,
        description="Título opcional del documento.",
    )

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def in_section(self, section: Section) -> list[CatalogEntry]:
        """Entradas de `section` preservando el orden de inserción."""

        return [entry for entry in self.entries if entry.section is section]
