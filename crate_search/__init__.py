"""
Crate Search - Single-shot searches against Rust content sources.

Public API for querying docs.rs, lib.rs or crates.io. Builds the search
URL for the chosen source, performs one blocking GET and keeps the raw
response in an in-memory history.
"""

from typing import Optional, Tuple

from .client import RequestExecutor
from .history import QueryHistory
from .logger import ConsoleLogger, InfoLogger
from .models import (
    BrowsyError,
    Pagination,
    Query,
    RequestBuildError,
    RequestState,
    ResponseError,
    Source,
)
from .sources import build_query_url, resolve

__all__ = [
    'search_source',
    'RequestExecutor',
    'QueryHistory',
    'ConsoleLogger',
    'InfoLogger',
    'Source',
    'Query',
    'Pagination',
    'RequestState',
    'BrowsyError',
    'RequestBuildError',
    'ResponseError',
    'build_query_url',
    'resolve',
]


def search_source(
    query: str,
    source: str = "docs",
    pagination: Optional[Pagination] = None,
    log: Optional[InfoLogger] = None,
    history: Optional[QueryHistory] = None
) -> Tuple[Query, str]:
    """
    Search a content source once and return the raw page.

    This is the main entry point for the crate-search module. It wires a
    RequestExecutor with a throwaway HTTP client.

    Args:
        query: Search text (e.g., "generics", "async runtime")
        source: "docs", "lib" or "crates"
        pagination: Optional results-per-page and page for docs.rs
        log: Optional InfoLogger (defaults to a ConsoleLogger)
        history: Optional QueryHistory to record into

    Returns:
        The recorded Query and raw response body

    Raises:
        RequestBuildError: If the query cannot be turned into a request
        ResponseError: If the network call fails

    Example:
        >>> query, body = search_source("serde", source="lib")
        >>> query.source
        <Source.LIB: 'https://lib.rs/'>
    """
    with RequestExecutor(log or ConsoleLogger(), history=history) as executor:
        return executor.execute(source, query, pagination)
