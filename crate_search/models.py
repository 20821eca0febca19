"""
Internal types for crate-search module.

These types are used after validation has already occurred at the CLI
boundary (browsy.py). They are simple enums and frozen dataclasses
without validation logic.
"""

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


# ============================================================================
# Configurable Constants
# ============================================================================

# Sent with every request; some registries reject anonymous clients
USER_AGENT = os.getenv("BROWSY_USER_AGENT", "browsy-cli/0.1 (+https://docs.rs)")

# Level for the stdlib "browsy" logger (console badges are always shown)
LOG_LEVEL = os.getenv("BROWSY_LOG_LEVEL", "WARNING").upper()

# CLI defaults for custom docs.rs searches
DEFAULT_QUANTITY = 10
DEFAULT_PAGE = 1

# Process exit codes, one per fatal failure class
EXIT_REQUEST_BUILD = 1
EXIT_RESPONSE = 3


# ============================================================================
# Enums
# ============================================================================

class Source(Enum):
    """
    Content source a query can target.

    Each member carries its fixed base URL as its value.
    """
    DOCS = "https://docs.rs/"
    LIB = "https://lib.rs/"
    CRATES = "https://crates.io/"

    @property
    def base_url(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Short name used on the command line ("docs", "lib", "crates")."""
        return self.name.lower()

    @classmethod
    def docs(cls) -> "Source":
        return cls.DOCS

    @classmethod
    def lib(cls) -> "Source":
        return cls.LIB

    @classmethod
    def crates(cls) -> "Source":
        return cls.CRATES


class RequestState(Enum):
    """Lifecycle of a single RequestExecutor.execute() call."""
    IDLE = "idle"
    BUILDING = "building"
    SENT = "sent"
    DONE = "done"
    ABORTED = "aborted"


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class Pagination:
    """
    Custom docs.rs search parameters.

    Attributes:
        count: Number of results per page
        page: 1-based page index
    """
    count: int = DEFAULT_QUANTITY
    page: int = DEFAULT_PAGE


@dataclass(frozen=True)
class Query:
    """
    One search request issued against a source.

    Attributes:
        source: Source the query was sent to
        text: Raw user query (not URL-encoded)
        issued_at: UTC timestamp of the request
    """
    source: Source
    text: str
    issued_at: datetime

    @classmethod
    def now(cls, source: Source, text: str) -> "Query":
        """Build a query stamped with the current UTC time."""
        return cls(source=source, text=text, issued_at=datetime.now(timezone.utc))


# ============================================================================
# Custom Exceptions
# ============================================================================

class BrowsyError(Exception):
    """
    Base class for fatal search failures.

    Attributes:
        exit_code: Process exit status the CLI should use
    """
    exit_code = 1


class RequestBuildError(BrowsyError):
    """
    Raised when an HTTP request cannot be built from the query URL.

    Attributes:
        url: The URL that failed to parse
        reason: Underlying error message
    """
    exit_code = EXIT_REQUEST_BUILD

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not create request from string query: {reason}")


class ResponseError(BrowsyError):
    """
    Raised when the request fails at the transport or protocol level.

    Attributes:
        url: The URL that was requested
        reason: Underlying error message
    """
    exit_code = EXIT_RESPONSE

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason or "unknown error"
        super().__init__(f"Request to {url} failed: {self.reason}")
