from __future__ import annotations

from core.domain.language import Language


def test_default_and_flags():
    assert Language.default() is Language.ENGLISH
    assert Language.from_bool(True) is Language.SPANISH
    assert Language.from_bool(False) is Language.ENGLISH
    assert Language("es").label() == "Spanish"


def test_headings_are_localized():
    assert Language.ENGLISH.heading("principle") == "Principles"
    assert Language.ENGLISH.heading("pattern") == "Patterns"
    assert Language.SPANISH.heading("pattern") == "Patrones"
    assert Language.SPANISH.heading("summary") == "Resumen"
