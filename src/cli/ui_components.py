"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.errors import CatalogError, RenderError
from core.domain.language import Language
from core.services.summary import SummaryLine


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (--stdout/pipelines).
    """

    title = Text("Catálogo de patrones", style="bold cyan")
    subtitle = Text("Principios • Patrones • Ejemplos", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_summary_table(lines: list[SummaryLine], language: Language) -> Table:
    """Tabla Rich con una fila por entrada, en orden de catálogo."""

    table = Table(title=language.heading("summary"))
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Section", style="magenta")
    table.add_column("Summary", style="white")
    for position, line in enumerate(lines, start=1):
        table.add_row(str(position), line.name, language.heading(line.section.value), line.clause)
    return table


def build_error_panel(exc: CatalogError) -> Panel:
    """Panel para presentar un error de catálogo."""

    body = Text(str(exc))
    if isinstance(exc, RenderError):
        body.append(f"\n\nEntrada: {exc.entry_name}", style="bold")
    return Panel(body, title=Text(type(exc).__name__, style="bold red"), border_style="red")
