"""Language utilities for the catalog renderer.

This module centralizes the language options supported across the
application. Keeping it in the domain layer allows the renderer, the HTML
template and the CLI to share a single source of truth for headings.
"""

from __future__ import annotations

from enum import Enum


_HEADINGS: dict[str, dict[str, str]] = {
    "en": {
        "principle": "Principles",
        "pattern": "Patterns",
        "summary": "Summary",
        "advantages": "Advantages",
        "examples": "Examples",
    },
    "es": {
        "principle": "Principios",
        "pattern": "Patrones",
        "summary": "Resumen",
        "advantages": "Ventajas",
        "examples": "Ejemplos",
    },
}


class Language(str, Enum):
    """Supported natural-language choices for rendered documents."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    @classmethod
    def from_bool(cls, spanish: bool) -> "Language":
        """Derive a language value from a boolean flag."""

        return cls.SPANISH if spanish else cls.ENGLISH

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return "Spanish" if self is Language.SPANISH else "English"

    def heading(self, key: str) -> str:
        """Localized heading for `key` (a section value, `summary`, ...)."""

        return _HEADINGS[self.value][key]
