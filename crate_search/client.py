"""
Search request executor with httpx.

Handles the single request of a search run:
- Source resolution and URL building
- Request construction and validation
- One blocking GET (no retries, no backoff)
- Recording the query and raw body in the history

All I/O is synchronous via httpx.Client.
"""

import logging
from typing import Optional, Tuple

import httpx

from .history import QueryHistory
from .logger import InfoLogger, explain
from .models import (
    USER_AGENT,
    Query,
    RequestBuildError,
    RequestState,
    ResponseError,
)
from .sources import PaginationLike, build_query_url, resolve


logger = logging.getLogger(__name__)


class RequestExecutor:
    """
    Runs search queries against a content source.

    Fatal failures are raised as RequestBuildError or ResponseError;
    turning them into process exit codes is left to the caller.
    """

    def __init__(
        self,
        log: InfoLogger,
        history: Optional[QueryHistory] = None,
        client: Optional[httpx.Client] = None
    ):
        """
        Initialize the executor.

        Args:
            log: InfoLogger that receives progress for each step
            history: History to record into (a fresh one if omitted)
            client: Optional httpx.Client. If not provided, one is created
                    on first use and closed by close().
        """
        self._log = log
        self.history = history if history is not None else QueryHistory(log)
        self._client = client
        self._owns_client = client is None
        self.state = RequestState.IDLE

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(headers={"User-Agent": USER_AGENT})
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this executor created it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RequestExecutor":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def execute(
        self,
        source_name: str,
        query_text: str,
        pagination: Optional[PaginationLike] = None
    ) -> Tuple[Query, str]:
        """
        Search a source and record the result.

        Args:
            source_name: "docs", "lib" or "crates" (unknown names fall back
                         to docs)
            query_text: Raw query text
            pagination: Optional (count, page) for custom docs.rs searches

        Returns:
            The recorded Query and the response body ("" when the body
            could not be read as text)

        Raises:
            RequestBuildError: If no request can be built from the URL
            ResponseError: If the request fails at transport/protocol level
        """
        self.state = RequestState.BUILDING
        source = resolve(source_name, self._log)

        self._log.info(
            "Searching",
            f'"{query_text.upper()}" @ {source.label.upper()}'
        )

        url = source.base_url
        try:
            url = build_query_url(source, query_text, pagination)
            request = self.client.build_request("GET", url)
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            # Lone surrogates (undecodable argv bytes) cannot be encoded as UTF-8
            self.state = RequestState.ABORTED
            self._log.fail(
                "Request Building",
                "Could not create request from string query"
            )
            raise RequestBuildError(url, str(e)) from e

        self._log.success("Query building", "Given query is valid")

        self.state = RequestState.SENT
        try:
            response = self.client.send(request)
        except httpx.HTTPError as e:
            self.state = RequestState.ABORTED
            self._log.fail(
                "Bad Response",
                explain("Could not read the text content of the response", e)
            )
            raise ResponseError(url, str(e)) from e

        self._log.info("Querying", url)
        if response.is_success:
            self._log.success("Request Success", "Response is OK")
        else:
            self._log.warn(
                "Request Status",
                f"Server answered {response.status_code} {response.reason_phrase}"
            )

        body = self._read_body(response)
        if not body:
            self._log.warn("Empty response", "No content came back for this query")

        query = Query.now(source, query_text)
        self.history.record(query, body)
        self.state = RequestState.DONE
        return query, body

    def _read_body(self, response: httpx.Response) -> str:
        """Decode the response body, or "" if it is not readable text."""
        try:
            return response.text
        except (UnicodeDecodeError, LookupError, httpx.HTTPError) as e:
            logger.debug("Undecodable response body from %s: %s", response.url, e)
            return ""
