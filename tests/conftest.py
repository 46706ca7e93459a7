"""Shared fixtures: a small mixed-format bus dataset."""

import pytest

from routefinder.data import RouteCatalog
from routefinder.finder import RouteFinder
from routefinder.search import LocationIndex, RouteMatcher, SuggestionSession


RAW_RECORDS = [
    {
        'english': 'Raida',
        'bangla': 'রাইদা',
        'routes': ['Postogola', 'Jatrabari', 'Malibagh', 'Rampura', 'Badda'],
        'service_type': 'Sitting Service',
        'time': '6:00 AM - 11:00 PM',
    },
    {
        'english': 'Achim Paribahan',
        'route': 'Gabtoli ⇄ Shyamoli ⇄ Asad Gate ⇄ Farmgate',
        'service_type': 'Local',
    },
    {
        'bus': 'Torongo Plus',
        'route': 'Mohammadpur → Asad Gate → Farmgate → Malibagh',
    },
    {
        'english': 'Dhaka Chaka',
        'route': 'Gulshan 1 - Gulshan 2 - Banani',
        'image': 'img/chaka.png',
    },
    {'english': 'Broken', 'route': 42},
    'not a record',
]


@pytest.fixture
def raw_records():
    return [dict(r) if isinstance(r, dict) else r for r in RAW_RECORDS]


@pytest.fixture
def catalog(raw_records):
    return RouteCatalog(raw_records)


@pytest.fixture
def index(catalog):
    return LocationIndex(catalog)


@pytest.fixture
def matcher(catalog):
    return RouteMatcher(catalog)


@pytest.fixture
def session(index):
    return SuggestionSession(index)


@pytest.fixture
def finder(catalog):
    return RouteFinder(catalog)
