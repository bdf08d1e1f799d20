"""Carga de catálogos desde JSON (data-driven).

Formato esperado:
- {"title": "...", "entries": [{"name": ..., "section": "principle", ...}]}

Por qué está en adapters:
- Leer archivos es un detalle de infraestructura; el Core solo recibe un
  `Catalog` ya validado.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from core.domain.errors import CatalogLoadError
from core.domain.models import Catalog


logger = logging.getLogger(__name__)


def _describe_validation(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location or '<raíz>'}: {first.get('msg', 'inválido')}"


def load_catalog(path: Path) -> Catalog:
    """Lee y valida un catálogo JSON."""

    logger.debug("Cargando catálogo desde %s", path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogLoadError(path, exc.strerror or str(exc)) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(path, f"JSON inválido (línea {exc.lineno}): {exc.msg}") from exc

    try:
        catalog = Catalog.model_validate(data)
    except ValidationError as exc:
        raise CatalogLoadError(path, _describe_validation(exc)) from exc

    logger.debug("Catálogo cargado: %d entradas", len(catalog.entries))
    return catalog
