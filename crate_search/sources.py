"""
Source resolution and query URL construction.

Maps the short CLI source names to Source members and builds the search
URL for each source:

- docs.rs:   releases/search?query=<q>, or releases/search?paginate=<b64>
             when custom pagination is requested
- lib.rs:    search?q=<q>
- crates.io: search?q=<q>

Only spaces are encoded (as "+"); everything else is passed through as-is.
"""

import base64
import logging
from typing import Optional, Tuple, Union

from .logger import InfoLogger
from .models import Pagination, Source


logger = logging.getLogger(__name__)

_NAMES = {
    "docs": Source.DOCS,
    "lib": Source.LIB,
    "crates": Source.CRATES,
}

PaginationLike = Union[Pagination, Tuple[int, int]]


def resolve(name: str, log: Optional[InfoLogger] = None) -> Source:
    """
    Map a short source name to its Source member.

    Unknown names fall back to docs.rs with a warning; this never raises.

    Args:
        name: "docs", "lib" or "crates"
        log: Optional InfoLogger to report the fallback through

    Returns:
        The matching Source, or Source.DOCS for anything unrecognized
    """
    source = _NAMES.get(name)
    if source is not None:
        return source

    message = f"Could not parse the given source <{name!r}>, defaulting to docs.rs"
    if log is not None:
        log.warn("Source", message)
    else:
        logger.warning(message)
    return Source.DOCS


def normalize_query(text: str) -> str:
    """Replace spaces with '+' for use in a query string."""
    return text.replace(" ", "+")


def encode_docs_pagination(text: str, count: int, page: int) -> str:
    """
    Build the docs.rs `paginate` hash.

    docs.rs accepts the whole query string base64-encoded, e.g.
    P3E9R2VuZXJpY3MmcGVyX3BhZ2U9MiZwYWdlPTE -> ?q=Generics&per_page=2&page=1

    Args:
        text: Raw query text
        count: Results per page
        page: Page index

    Returns:
        Standard base64 of the query string with trailing '=' removed
    """
    raw = f"?q={normalize_query(text)}&per_page={count}&page={page}"
    encoded = base64.b64encode(raw.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=")


def build_query_url(
    source: Source,
    text: str,
    pagination: Optional[PaginationLike] = None
) -> str:
    """
    Build the search URL for a query against a source.

    Pagination only affects docs.rs; lib.rs and crates.io accept it
    but ignore it.

    Args:
        source: Target source
        text: Raw query text
        pagination: Optional Pagination or (count, page) tuple

    Returns:
        Fully-qualified search URL

    Example:
        >>> build_query_url(Source.DOCS, "Super cool")
        'https://docs.rs/releases/search?query=Super+cool'
    """
    if source is Source.DOCS:
        if pagination is not None:
            count, page = _unpack(pagination)
            return (
                f"{source.base_url}releases/search?paginate="
                f"{encode_docs_pagination(text, count, page)}"
            )
        return f"{source.base_url}releases/search?query={normalize_query(text)}"
    elif source is Source.LIB:
        return f"{source.base_url}search?q={normalize_query(text)}"
    elif source is Source.CRATES:
        return f"{source.base_url}search?q={normalize_query(text)}"
    raise ValueError(f"Unknown source: {source!r}")


def _unpack(pagination: PaginationLike) -> Tuple[int, int]:
    if isinstance(pagination, Pagination):
        return pagination.count, pagination.page
    count, page = pagination
    return count, page
