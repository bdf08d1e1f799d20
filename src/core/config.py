"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que exportadores y CLI lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


APP_NAME = "catalogo-patrones"


class OutputFormat(str, Enum):
    """Formatos de salida soportados por el pipeline de exportación."""

    MARKDOWN = "markdown"
    HTML = "html"
    PDF = "pdf"
    JSON = "json"

    @property
    def extension(self) -> str:
        return ".md" if self is OutputFormat.MARKDOWN else f".{self.value}"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/exportadores.
    """

    model_config = SettingsConfigDict(
        env_prefix="CATALOGO_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Idioma de los encabezados del documento (en/es).",
    )
    default_format: OutputFormat = Field(
        default=OutputFormat.MARKDOWN,
        description="Formato usado por `render` cuando no se pasa --format.",
    )
    output_dir: Path = Field(
        default=Path("reports"),
        description="Directorio donde se escriben los documentos generados.",
    )
    catalog_path: Path | None = Field(
        default=None,
        description="Catálogo JSON por defecto (si no, el catálogo incluido).",
    )
