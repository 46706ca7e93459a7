"""
Route Matcher
=============
Finds services that pass through two locations, in either direction.
"""

import logging
from typing import List, Optional, Sequence

from ..data.catalog import RouteCatalog, ServiceRecord
from ..errors import InputError

logger = logging.getLogger(__name__)


def first_stop_index(stops: Sequence[str], query: str) -> Optional[int]:
    """Index of the first stop whose name contains ``query`` (case-insensitive)."""
    needle = query.lower()
    for index, stop in enumerate(stops):
        if needle in stop.lower():
            return index
    return None


class RouteMatcher:
    """Direct-route search over a RouteCatalog."""

    def __init__(self, catalog: RouteCatalog):
        self.catalog = catalog

    def matches(self, record: ServiceRecord, from_query: str, to_query: str) -> bool:
        """
        Check whether a service connects the two locations.

        Both queries must hit a stop, and not the same one.
        """
        from_index = first_stop_index(record.stops, from_query)
        if from_index is None:
            return False
        to_index = first_stop_index(record.stops, to_query)
        return to_index is not None and to_index != from_index

    def find_routes(self, from_query: str, to_query: str) -> List[ServiceRecord]:
        """
        Find services whose route includes both locations.

        Args:
            from_query: Partial name of the origin
            to_query: Partial name of the destination

        Returns:
            Matching services in catalog order (possibly empty)

        Raises:
            InputError: If either query is empty or not a string
        """
        if not isinstance(from_query, str) or not isinstance(to_query, str):
            raise InputError()
        if not from_query or not to_query:
            raise InputError()

        results = [
            record for record in self.catalog
            if self.matches(record, from_query, to_query)
        ]
        logger.debug(f"find_routes({from_query!r}, {to_query!r}): {len(results)} matches")
        return results
