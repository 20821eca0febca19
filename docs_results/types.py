"""
Internal types for docs-results module.

Result descriptors parsed out of a docs.rs search page. They carry plain
strings only; anything missing from the markup is left empty.
"""

import os
from dataclasses import dataclass
from typing import List


# Minimum rapidfuzz score for a typed crate name to select a result
SELECT_FLOOR = int(os.getenv("BROWSY_SELECT_FLOOR", "70"))

# Menu labels are cut to this many characters
WIDGET_WIDTH = 80

DOCS_BASE_URL = "https://docs.rs"


@dataclass(frozen=True)
class CrateResult:
    """
    A single crate listed on a docs.rs search page.

    Attributes:
        name: Crate name
        version: Release version ("" if not shown)
        description: One-line crate description
        released: Release date text as shown on the page
        url: Absolute link to the crate's documentation
    """
    name: str
    version: str = ""
    description: str = ""
    released: str = ""
    url: str = ""

    def widget(self) -> str:
        """One-line label echoed when the menu selects this crate."""
        label = self.name
        if self.version:
            label += f" v{self.version}"
        if self.description:
            label += f" - {self.description}"
        if len(label) > WIDGET_WIDTH:
            label = label[:WIDGET_WIDTH - 3] + "..."
        return label

    def info_lines(self) -> List[str]:
        """Lines shown in the crate detail view."""
        lines = [f"Name: {self.name}"]
        if self.version:
            lines.append(f"Version: {self.version}")
        if self.released:
            lines.append(f"Released: {self.released}")
        if self.url:
            lines.append(f"Docs: {self.url}")
        lines.append("")
        lines.append(self.description or "No description provided.")
        return lines
