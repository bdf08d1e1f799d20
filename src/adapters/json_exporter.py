"""Exportación JSON del catálogo.

Por qué JSON:
- Es el mismo formato que acepta `load_catalog`, así que sirve para normalizar
  catálogos escritos a mano.
- Salida estable (claves ordenadas) para diffs limpios en control de versiones.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import Catalog


def dump_catalog_json(catalog: Catalog) -> str:
    payload = catalog.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_catalog_json(*, catalog: Catalog, output_path: Path) -> Path:
    """Exporta `Catalog` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_catalog_json(catalog), encoding="utf-8")
    return output_path
