"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI puede distinguir "catálogo inválido" de fallos de infraestructura
  (PDF, disco) sin inspeccionar mensajes.
- Ningún error deja salida parcial: el render falla completo o no falla.
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """Clase base para errores del catálogo."""


class EmptyCatalogError(CatalogError):
    """El catálogo no tiene entradas que renderizar."""

    def __init__(self) -> None:
        super().__init__("El catálogo está vacío: no hay entradas que renderizar.")


class DuplicateNameError(CatalogError):
    """Dos entradas comparten el mismo `name`."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Nombre de entrada duplicado: {name!r}")


class RenderError(CatalogError):
    """Una entrada concreta no se pudo formatear."""

    def __init__(self, entry_name: str, reason: str) -> None:
        self.entry_name = entry_name
        self.reason = reason
        super().__init__(f"No se pudo renderizar {entry_name!r}: {reason}")


class CatalogLoadError(CatalogError):
    """El archivo de entrada no existe, no es JSON o no cumple el esquema."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"No se pudo cargar {path}: {reason}")
