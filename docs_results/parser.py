"""
docs.rs search page parsing with BeautifulSoup.

A docs.rs release search lists each crate as:

    <a class="release" href="/tokio/latest/tokio/">
      <div class="... name">tokio-1.40.0</div>
      <div class="... description">An event-driven, non-blocking I/O ...</div>
      <div class="... date" title="2024-09-01T00:00:00Z">Sep 1, 2024</div>
    </a>

Anything that does not look like that is skipped. Parsing never raises;
malformed or unrelated markup yields an empty list.
"""

import logging
import re
from typing import List, Optional, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from .types import DOCS_BASE_URL, CrateResult


logger = logging.getLogger(__name__)

# "<crate>-<semver>"; crate names may themselves contain dashes
_NAME_VERSION = re.compile(r"^(?P<name>.+)-(?P<version>\d+\.\d+\.\d+\S*)$")


def parse_docs_results(html: str) -> List[CrateResult]:
    """
    Extract crate results from a docs.rs search page.

    Args:
        html: Raw response body

    Returns:
        Parsed results in page order (empty if none could be found)
    """
    if not html or not html.strip():
        return []

    try:
        soup = BeautifulSoup(html, "html.parser")
    except Exception as e:
        logger.debug("Could not parse docs.rs page: %s", e)
        return []

    results: List[CrateResult] = []
    for anchor in soup.select("a.release"):
        result = _parse_release(anchor)
        if result is not None:
            results.append(result)

    logger.debug("Parsed %d crates from docs.rs page", len(results))
    return results


def split_name_version(text: str) -> Tuple[str, str]:
    """
    Split "serde-json-1.0.0" style labels into name and version.

    Args:
        text: Name cell text

    Returns:
        (name, version); version is "" when none is present
    """
    text = text.strip()
    match = _NAME_VERSION.match(text)
    if not match:
        return text, ""
    return match.group("name"), match.group("version")


def _parse_release(anchor: Tag) -> Optional[CrateResult]:
    name_cell = anchor.select_one(".name")
    if name_cell is None:
        return None

    name, version = split_name_version(name_cell.get_text(" ", strip=True))
    if not name:
        return None

    href = anchor.get("href") or ""
    date_cell = anchor.select_one(".date")

    return CrateResult(
        name=name,
        version=version,
        description=_cell_text(anchor, ".description"),
        released=date_cell.get_text(" ", strip=True) if date_cell else "",
        url=urljoin(DOCS_BASE_URL, href) if href else "",
    )


def _cell_text(anchor: Tag, selector: str) -> str:
    cell = anchor.select_one(selector)
    if cell is None:
        return ""
    return " ".join(cell.get_text(" ", strip=True).split())
