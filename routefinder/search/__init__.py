"""
Search Modules
==============
Location autocomplete and direct-route matching.
"""

from .location_index import LocationIndex
from .suggestions import SuggestionSession, SuggestionState
from .matcher import RouteMatcher, first_stop_index

__all__ = [
    'LocationIndex',
    'SuggestionSession',
    'SuggestionState',
    'RouteMatcher',
    'first_stop_index',
]
