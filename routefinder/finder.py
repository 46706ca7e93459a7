"""
Route Finder
============
Two-field controller: "from" and "to" suggestion sessions sharing one
catalog, plus the search action.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from .data.catalog import RouteCatalog, ServiceRecord
from .search import LocationIndex, RouteMatcher, SuggestionSession

logger = logging.getLogger(__name__)

FIELDS = ('from', 'to')


class RouteFinder:
    """
    Wires two autocomplete fields to a route search.

    Usage:
        finder = RouteFinder(catalog)
        finder.from_field.text_changed('gab')
        finder.from_field.pointer_select(0)
        finder.to_field.text_changed('farm')
        finder.to_field.arrow_down()
        finder.to_field.enter()
        results = finder.search()
    """

    def __init__(self, catalog: Optional[RouteCatalog] = None):
        self.catalog = catalog if catalog is not None else RouteCatalog()
        self.index = LocationIndex(self.catalog)
        self.matcher = RouteMatcher(self.catalog)
        self.from_field = SuggestionSession(self.index)
        self.to_field = SuggestionSession(self.index)

    @property
    def fields(self) -> Dict[str, SuggestionSession]:
        return {'from': self.from_field, 'to': self.to_field}

    def field(self, name: str) -> SuggestionSession:
        """Session for the ``"from"`` or ``"to"`` field."""
        return self.fields[name]

    def pointer_down(self, target: str) -> None:
        """
        A pointer press landed on ``target``.

        Targets are a field name (``"from"``), its list
        (``"from-suggestions"``), or anything else. Each field's list
        closes unless the press was on that field or its own list.
        """
        for name, session in self.fields.items():
            if target not in (name, f"{name}-suggestions"):
                session.dismiss()

    def search(self) -> List[ServiceRecord]:
        """
        Search for services between the two field values.

        Raises:
            InputError: If either field is empty
        """
        return self.matcher.find_routes(self.from_field.value, self.to_field.value)

    def reload(self, raw_records: Iterable[Any]) -> None:
        """Replace the dataset. Open lists keep their candidates until the next query."""
        self.catalog.load(raw_records)
