"""Rich components for the CLI.

Tables and panels live here so commands stay free of presentation details.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.case_variant import CaseVariant
from core.domain.models import ToolOutcome
from core.services.case_formatter import format_case

_EXAMPLE_TOKENS = ("hello", "world", "test")


def print_banner(console: Console) -> None:
    """Print the welcome banner."""

    title = Text("spannerly", style="bold cyan")
    subtitle = Text("Case conversion • Base64 • Distance", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_tokens_table(tokens: Sequence[str]) -> Table:
    table = Table(title="Tokens")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Token", style="cyan")
    for index, token in enumerate(tokens, start=1):
        table.add_row(str(index), token)
    return table


def build_variants_table() -> Table:
    """One row per case variant, with an example rendering."""

    table = Table(title="Case Variants")
    table.add_column("Variant", style="cyan", no_wrap=True)
    table.add_column("Label", style="white")
    table.add_column("Example", style="magenta")
    for variant in CaseVariant:
        table.add_row(variant.value, variant.label(), format_case(_EXAMPLE_TOKENS, variant))
    return table


def build_outcome_panel(outcome: ToolOutcome) -> Panel:
    """Panel for a `ToolOutcome`, green on success and red on failure."""

    body = Text()
    if outcome.ok:
        body.append(str(outcome.output))
    else:
        body.append(outcome.message or "", style="red")

    subtitle = None
    if outcome.variant is not None:
        subtitle = outcome.variant.label()
    elif outcome.direction is not None:
        subtitle = outcome.direction.label()

    return Panel(
        body,
        title=Text(outcome.tool, style="bold"),
        subtitle=subtitle,
        border_style="green" if outcome.ok else "red",
    )
