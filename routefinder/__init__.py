"""
Bus Route Finder
================
Location autocomplete and direct-route search over a static bus dataset.
"""

from .data import RouteCatalog, ServiceRecord, LocationSet, BusDataLoader
from .errors import RouteFinderError, InputError
from .finder import RouteFinder
from .search import LocationIndex, SuggestionSession, SuggestionState, RouteMatcher

__version__ = "1.0.0"

__all__ = [
    'RouteCatalog',
    'ServiceRecord',
    'LocationSet',
    'BusDataLoader',
    'RouteFinderError',
    'InputError',
    'RouteFinder',
    'LocationIndex',
    'SuggestionSession',
    'SuggestionState',
    'RouteMatcher',
]
