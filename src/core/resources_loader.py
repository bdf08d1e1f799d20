"""Cargador de recursos incluidos en el paquete.

Este módulo vive en `core/` porque:
- centraliza *qué* catálogo se usa por defecto sin acoplarse a la CLI
- evita duplicar lógica de paths entre comandos.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.models import Catalog


_RESOURCES_DIR = Path(__file__).resolve().parent / "resources"
DEFAULT_CATALOG_FILENAME = "catalogo.json"


def default_catalog_path() -> Path:
    """Ruta al catálogo en español incluido con el proyecto."""

    return _RESOURCES_DIR / DEFAULT_CATALOG_FILENAME


def load_default_catalog() -> Catalog:
    """Carga el catálogo incluido (principios y patrones de diseño)."""

    raw = default_catalog_path().read_text(encoding="utf-8")
    return Catalog.model_validate_json(raw)
