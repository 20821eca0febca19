"""
Docs Results - Terminal browsing of docs.rs search pages.

Public API for turning the last stored docs.rs search into a list of
crate descriptors and browsing them in a small selection menu. lib.rs
and crates.io pages are not supported for display.
"""

from typing import Callable, List, Optional

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from crate_search.models import BrowsyError, Query, Source

from .formatters import crate_detail, empty_results, menu_hint, results_table, selection_line
from .matcher import CrateSelector
from .parser import parse_docs_results
from .types import CrateResult

__all__ = ['present_results', 'parse_docs_results', 'CrateResult', 'UnsupportedSourceError']

_QUIT = {"", "q", "quit"}


class UnsupportedSourceError(BrowsyError):
    """
    Raised when results of a source other than docs.rs are presented.

    Attributes:
        source: The source whose results were requested
    """
    def __init__(self, source: Source):
        self.source = source
        super().__init__(f"Unsupported source for result display: {source.label}")


def present_results(
    query: Query,
    body: str,
    console: Optional[Console] = None,
    prompt: Optional[Callable[[str], str]] = None,
    interactive: bool = True
) -> List[CrateResult]:
    """
    Show the crates found by a docs.rs search and let the user inspect them.

    Args:
        query: The query that produced the page
        body: Raw response body
        console: rich Console to render to (defaults to stdout)
        prompt: Callable returning user input for a prompt label
                (defaults to rich's Prompt.ask)
        interactive: If False, only print the result table

    Returns:
        Parsed results (empty when the page listed nothing)

    Raises:
        UnsupportedSourceError: If the query did not target docs.rs
    """
    if query.source is not Source.DOCS:
        raise UnsupportedSourceError(query.source)

    console = console or Console()
    if prompt is None:
        def prompt(label: str) -> str:
            return Prompt.ask(label, console=console, default="", show_default=False)

    results = parse_docs_results(body)
    if not results:
        console.print(empty_results(query.text))
        return results

    console.print(results_table(query.text, results))
    if not interactive:
        return results

    selector = CrateSelector(results)
    while True:
        console.print(menu_hint())
        try:
            choice = prompt("Select a crate")
        except (EOFError, KeyboardInterrupt):
            break
        if choice.strip().lower() in _QUIT:
            break

        selected = selector.select(choice)
        if selected is None:
            console.print(Text(f'No crate matches "{choice}"', style="yellow"))
            continue

        console.print(selection_line(selected))
        console.print(crate_detail(selected))
        try:
            prompt("Press Enter to continue")
        except (EOFError, KeyboardInterrupt):
            break
        console.print(results_table(query.text, results))

    return results
