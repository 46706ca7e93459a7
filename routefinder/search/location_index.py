"""
Location Index
==============
Substring lookup of location names for autocomplete.
"""

from typing import List

from ..config import SUGGESTION_LIMIT
from ..data.catalog import RouteCatalog


class LocationIndex:
    """Case-insensitive substring search over a catalog's locations."""

    def __init__(self, catalog: RouteCatalog, limit: int = SUGGESTION_LIMIT):
        self.catalog = catalog
        self.limit = limit

    def search(self, query_text: str) -> List[str]:
        """
        Find location names containing the query.

        Args:
            query_text: Partial location name, any case

        Returns:
            Up to ``limit`` names in first-seen dataset order. An empty
            query returns nothing.
        """
        if not query_text or not isinstance(query_text, str) or self.limit <= 0:
            return []

        needle = query_text.lower()
        matches = []
        for name in self.catalog.locations():
            if len(matches) >= self.limit:
                break
            if needle in name.lower():
                matches.append(name)
        return matches
