"""
Menu input matching for crate selection.

Resolves what the user typed at the "Select a crate" prompt to one of the
listed results. Uses a fast-to-fuzzy cascade:
1. Menu index (1-based)
2. Exact crate name (case-insensitive)
3. Fuzzy name match via RapidFuzz WRatio
"""

from typing import List, Optional

from rapidfuzz import fuzz, process

from .types import SELECT_FLOOR, CrateResult


class CrateSelector:
    """
    Picks a CrateResult from menu input.

    Returns None for anything that does not resolve confidently, so the
    caller can re-prompt.
    """

    def __init__(self, results: List[CrateResult], floor: int = SELECT_FLOOR):
        """
        Initialize selector with the listed results.

        Args:
            results: Results in menu order
            floor: Minimum fuzzy score (0-100) to accept a name match
        """
        self._results = results
        self._floor = floor
        self._by_name = {}
        for result in results:
            # First listing wins when a name appears twice
            self._by_name.setdefault(result.name.lower(), result)

    def select(self, choice: str) -> Optional[CrateResult]:
        """
        Resolve menu input to a result.

        Args:
            choice: Raw prompt input

        Returns:
            The selected CrateResult, or None
        """
        choice = choice.strip()
        if not choice or not self._results:
            return None

        if choice.isdigit():
            index = int(choice)
            if 1 <= index <= len(self._results):
                return self._results[index - 1]
            return None

        exact = self._by_name.get(choice.lower())
        if exact is not None:
            return exact

        match = process.extractOne(
            choice.lower(),
            list(self._by_name),
            scorer=fuzz.WRatio,
            score_cutoff=self._floor
        )
        if match is None:
            return None
        return self._by_name[match[0]]
