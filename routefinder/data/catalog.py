"""
Route Catalog
=============
Normalized bus service records and the set of locations they serve.

Raw records come in two shapes:

    {"english": "Raida", "routes": ["Gabtoli", "Shyamoli", "Farmgate"]}
    {"english": "Raida", "route": "Gabtoli ⇄ Shyamoli - Farmgate"}

Both normalize to the same ordered ``stops`` tuple.
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import pandas as pd

from ..config import ROUTE_SEPARATOR_PATTERN, ROUTE_DISPLAY_JOINER, UNNAMED_SERVICE

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(ROUTE_SEPARATOR_PATTERN)


def parse_stops(raw: Any) -> Tuple[str, ...]:
    """
    Derive the ordered stop sequence of a raw record.

    The explicit ``routes`` list wins when present. Otherwise the legacy
    ``route`` string is split on the separator tokens. Anything else
    yields no stops.

    Args:
        raw: A decoded dataset record (normally a dict)

    Returns:
        Tuple of trimmed, non-empty stop names
    """
    if not isinstance(raw, Mapping):
        return ()

    routes = raw.get('routes')
    if isinstance(routes, list):
        points = routes
    elif isinstance(raw.get('route'), str):
        points = _SEPARATOR_RE.split(raw['route'])
    else:
        return ()

    return tuple(
        point.strip() for point in points
        if isinstance(point, str) and point.strip()
    )


def _optional_text(raw: Mapping, key: str) -> Optional[str]:
    value = raw.get(key)
    if value is None or value == '':
        return None
    return str(value)


@dataclass(frozen=True)
class ServiceRecord:
    """One bus service: identity, ordered stops and pass-through details."""

    name: Optional[str]
    local_name: Optional[str]
    stops: Tuple[str, ...]
    route_text: str = ''
    service_type: Optional[str] = None
    time: Optional[str] = None
    image: Optional[str] = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_raw(cls, raw: Any) -> 'ServiceRecord':
        """
        Build a record from a loosely-typed dataset entry.

        Malformed entries never raise: they become records with no stops.
        """
        if not isinstance(raw, Mapping):
            return cls(name=None, local_name=None, stops=(), raw={})

        stops = parse_stops(raw)
        if isinstance(raw.get('routes'), list):
            route_text = ROUTE_DISPLAY_JOINER.join(stops)
        elif isinstance(raw.get('route'), str):
            route_text = raw['route']
        else:
            route_text = ''

        return cls(
            name=_optional_text(raw, 'english') or _optional_text(raw, 'bus'),
            local_name=_optional_text(raw, 'bangla'),
            stops=stops,
            route_text=route_text,
            service_type=_optional_text(raw, 'service_type'),
            time=_optional_text(raw, 'time'),
            image=_optional_text(raw, 'image'),
            raw=dict(raw),
        )

    @property
    def display_name(self) -> str:
        """Name shown on result cards."""
        return self.name or UNNAMED_SERVICE


class LocationSet:
    """
    Read-only set of distinct stop names.

    Iterates in first-seen order across the dataset scan. Names are stored
    exactly as written, so differently-cased spellings stay distinct.
    """

    __slots__ = ('_names', '_members')

    def __init__(self, names: Iterable[str] = ()):
        self._names: Tuple[str, ...] = tuple(dict.fromkeys(names))
        self._members = frozenset(self._names)

    @classmethod
    def from_records(cls, records: Iterable[ServiceRecord]) -> 'LocationSet':
        return cls(stop for record in records for stop in record.stops)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocationSet):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"LocationSet({len(self._names)} locations)"


class RouteCatalog:
    """
    The loaded bus dataset.

    Usage:
        catalog = RouteCatalog()
        catalog.load(document['data'])

        for record in catalog:
            print(record.display_name, record.stops)

        names = catalog.locations()

    An unloaded catalog is simply empty, so it can be handed to the
    index and matcher before the data arrives.
    """

    def __init__(self, raw_records: Optional[Iterable[Any]] = None):
        self._records: Tuple[ServiceRecord, ...] = ()
        self._locations = LocationSet()
        if raw_records is not None:
            self.load(raw_records)

    @classmethod
    def from_document(cls, document: Any) -> 'RouteCatalog':
        """Build a catalog from a decoded ``{"data": [...]}`` document."""
        data = document.get('data') if isinstance(document, Mapping) else None
        return cls(data if isinstance(data, list) else [])

    def load(self, raw_records: Iterable[Any]) -> 'RouteCatalog':
        """
        Replace the catalog contents with the given raw records.

        Args:
            raw_records: Decoded dataset entries, in dataset order

        Returns:
            The catalog itself
        """
        records = tuple(ServiceRecord.from_raw(raw) for raw in raw_records)
        self._records = records
        self._locations = LocationSet.from_records(records)
        logger.info(f"Catalog loaded: {len(records):,} services, {len(self._locations):,} locations")
        return self

    def locations(self) -> LocationSet:
        """Distinct stop names in first-seen order."""
        return self._locations

    @property
    def records(self) -> Tuple[ServiceRecord, ...]:
        return self._records

    def __iter__(self) -> Iterator[ServiceRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    # ========================================================================
    # SUMMARIES
    # ========================================================================

    def to_frame(self) -> pd.DataFrame:
        """
        Summarize the catalog as a DataFrame.

        Returns:
            One row per service with name, local name, service type
            and stop count
        """
        rows: List[Dict[str, Any]] = [
            {
                'name': record.display_name,
                'local_name': record.local_name,
                'service_type': record.service_type,
                'stop_count': len(record.stops),
            }
            for record in self._records
        ]
        return pd.DataFrame(rows, columns=['name', 'local_name', 'service_type', 'stop_count'])

    def service_type_counts(self) -> pd.Series:
        """Number of services per service type (unknown types grouped)."""
        frame = self.to_frame()
        if frame.empty:
            return pd.Series(dtype='int64', name='services')
        counts = frame['service_type'].fillna('Unknown').value_counts()
        counts.name = 'services'
        return counts
