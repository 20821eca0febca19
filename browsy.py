#!/usr/bin/env python3
"""
Browsy CLI

A command-line helper to research Rust programming doubts. Searches
docs.rs, lib.rs or crates.io for a query, keeps the raw page and lets
you browse the crates found on docs.rs.

Usage:
    browsy -q "async runtime"
    browsy -q generics -c --quantity 30 --page 2
    browsy -q "tokio runtime" -s lib
"""

import argparse
import logging
import sys
from typing import List, Literal, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from rich.console import Console

from crate_search import BrowsyError, ConsoleLogger, Pagination, RequestExecutor
from crate_search.models import DEFAULT_PAGE, DEFAULT_QUANTITY, LOG_LEVEL
from docs_results import UnsupportedSourceError, present_results

logger = logging.getLogger("browsy")

# Width of the dashed rule printed before each search
SEPARATOR_WIDTH = 35


# ============================================================================
# Input Model (Pydantic v2)
# ============================================================================

class SearchInput(BaseModel):
    """Validated command-line arguments for one search."""
    model_config = ConfigDict(extra="forbid")

    query: str = Field(
        ...,
        description="Search text. Examples: 'generics', 'proc macros', 'async runtime'"
    )
    source: Literal["docs", "lib", "crates"] = Field(
        default="docs",
        description="Source to search: 'docs' (docs.rs), 'lib' (lib.rs), 'crates' (crates.io)"
    )
    custom: bool = Field(
        default=False,
        description="Use custom result quantity and page index (docs.rs only)"
    )
    quantity: int = Field(
        default=DEFAULT_QUANTITY,
        description="Number of results per page for custom searches",
        ge=1
    )
    page: int = Field(
        default=DEFAULT_PAGE,
        description="Page index for custom searches",
        ge=1
    )
    interactive: bool = Field(
        default=False,
        description="Reserved for a future interactive mode"
    )
    no_menu: bool = Field(
        default=False,
        description="Skip the result browser after the search"
    )

    @field_validator("query", mode="plain")
    @classmethod
    def keep_raw_query(cls, value):
        # Plain mode skips pydantic's unicode check; undecodable argv bytes
        # must reach the executor and fail there as a request build error
        if not isinstance(value, str) or not value:
            raise ValueError("query must be a non-empty string")
        return value

    @property
    def pagination(self) -> Optional[Pagination]:
        if not self.custom:
            return None
        return Pagination(count=self.quantity, page=self.page)


# ============================================================================
# Argument Parsing
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="browsy",
        description="A CLI tool to research your Rust programming doubts"
    )
    parser.add_argument(
        "-q", "--query", required=True,
        help="String query to use as target search values"
    )
    parser.add_argument(
        "-s", "--source", choices=["docs", "lib", "crates"], default="docs",
        help="Source to use in the query resolution (default: docs)"
    )
    parser.add_argument(
        "-c", "--custom", action="store_true",
        help="Allow custom query params, like item quantity and page index"
    )
    parser.add_argument(
        "--quantity", type=int, default=DEFAULT_QUANTITY,
        help=f"Number of results shown with --custom (default: {DEFAULT_QUANTITY})"
    )
    parser.add_argument(
        "--page", type=int, default=DEFAULT_PAGE,
        help=f"Page index used with --custom (default: {DEFAULT_PAGE})"
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true",
        help="Interactive mode, selecting multiple factors (unimplemented)"
    )
    parser.add_argument(
        "--no-menu", action="store_true",
        help="Do not browse the results after searching"
    )
    return parser


def parse_input(argv: Optional[List[str]] = None) -> SearchInput:
    """
    Parse and validate command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Validated SearchInput

    Raises:
        SystemExit: With status 2 on invalid arguments
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return SearchInput(**vars(args))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        parser.error(problems)


# ============================================================================
# Entry Point
# ============================================================================

def main(
    argv: Optional[List[str]] = None,
    console: Optional[Console] = None,
    client: Optional[httpx.Client] = None
) -> int:
    """
    Run one search and browse its results.

    Args:
        argv: Argument list (defaults to sys.argv[1:])
        console: rich Console for all output (defaults to stdout)
        client: Optional httpx.Client to send the request with

    Returns:
        Process exit code: 0 on success, 1 when the request cannot be
        built, 3 when the network call fails
    """
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.WARNING))
    params = parse_input(argv)

    console = console or Console()
    log = ConsoleLogger(console)

    console.clear()
    log.separator(SEPARATOR_WIDTH)

    if params.interactive:
        log.warn("Interactive mode", "Not implemented yet, using the default menu")

    with RequestExecutor(log, client=client) as executor:
        try:
            query, body = executor.execute(params.source, params.query, params.pagination)
        except BrowsyError as e:
            logger.debug("Search aborted: %s", e)
            return e.exit_code

    if params.no_menu:
        return 0

    try:
        present_results(query, body, console=console, interactive=console.is_terminal)
    except UnsupportedSourceError as e:
        log.warn("Result Display", str(e))

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
