"""
In-memory query history.

Keeps every query issued during the process lifetime, grouped by source,
plus the most recent query paired with its raw response body. Nothing is
persisted and nothing is evicted.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .logger import InfoLogger
from .models import Query, Source


logger = logging.getLogger(__name__)


class QueryHistory:
    """
    Process-lifetime record of issued queries.

    Every Source has an entry from construction on, so recording never
    needs to create keys. Consumers get read-only views; only record()
    mutates state.
    """

    def __init__(self, log: Optional[InfoLogger] = None):
        """
        Initialize an empty history.

        Args:
            log: Optional InfoLogger for non-fatal storage warnings
        """
        self._log = log
        self._by_source: Dict[Source, List[Query]] = {source: [] for source in Source}
        self._last: Optional[Tuple[Query, str]] = None

    @property
    def by_source(self) -> Mapping[Source, List[Query]]:
        """Read-only view of the per-source query lists."""
        return MappingProxyType(self._by_source)

    def record(self, query: Query, body: str) -> None:
        """
        Store a query and the body it produced.

        The "last search" slot is always updated. If the query's source
        has no entry (should not happen), the append is skipped with a
        warning.

        Args:
            query: The issued query
            body: Raw response body (possibly empty)
        """
        self._last = (query, body)

        entries = self._by_source.get(query.source)
        if entries is None:
            self._warn("Query Storing", "Could not add to query history")
            return
        entries.append(query)

    def last_search(self) -> Optional[Tuple[Query, str]]:
        """Most recent (query, body) pair, or None before any record()."""
        return self._last

    def last_query(self) -> Optional[Query]:
        return self._last[0] if self._last else None

    def last_body(self) -> Optional[str]:
        return self._last[1] if self._last else None

    def queries(self, source: Source) -> Tuple[Query, ...]:
        """Queries issued against one source, oldest first."""
        return tuple(self._by_source.get(source, ()))

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._by_source.values())

    def _warn(self, title: str, message: str) -> None:
        if self._log is not None:
            self._log.warn(title, message)
        else:
            logger.warning("%s: %s", title, message)
