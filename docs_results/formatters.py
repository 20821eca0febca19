"""
Terminal rendering for docs.rs results.

Builds rich renderables for the result list and the crate detail view.
The interactive loop in __init__ decides when to print them.
"""

from typing import List

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .types import CrateResult


# Description column is cut to this many characters
DESCRIPTION_LIMIT = 60


def results_table(query: str, results: List[CrateResult]) -> Table:
    """
    Format crate results as a numbered table.

    Args:
        query: Search text (used in the title)
        results: Parsed results in page order

    Returns:
        rich Table with one row per crate
    """
    table = Table(title=f'Crates Found for "{query}"', title_style="bold white on green")
    table.add_column("#", justify="right", style="bold")
    table.add_column("Crate", style="cyan", no_wrap=True)
    table.add_column("Version", style="magenta")
    table.add_column("Released", style="bright_black")
    table.add_column("Description")

    for index, result in enumerate(results, start=1):
        table.add_row(
            str(index),
            result.name,
            result.version or "-",
            result.released or "-",
            _truncate(result.description),
        )
    return table


def crate_detail(result: CrateResult) -> Panel:
    """Format the detail view for one crate."""
    body = Text("\n".join(result.info_lines()))
    return Panel(
        body,
        title=Text(" Crate Description ", style="bold white on green"),
        expand=False,
    )


def empty_results(query: str) -> Text:
    """Message shown when a search page listed no crates."""
    return Text(
        f'No crates found for "{query}". The response may have been empty.',
        style="bold yellow",
    )


def selection_line(result: CrateResult) -> Text:
    """Echo which crate the menu input resolved to."""
    return Text(f"Selected {result.widget()}", style="bold cyan")


def menu_hint() -> Text:
    return Text("[number or name] to inspect, [q] to quit", style="italic bright_black")


def _truncate(text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    if len(text) <= limit:
        return text
    return text[:limit - 3] + "..."
