"""Tests for location autocomplete lookup."""

from routefinder.data import RouteCatalog
from routefinder.search import LocationIndex


def test_substring_case_insensitive(index):
    assert index.search('GATE') == ['Asad Gate', 'Farmgate']


def test_order_is_first_seen_not_alphabetical(index):
    assert index.search('a') == [
        'Postogola', 'Jatrabari', 'Malibagh', 'Rampura', 'Badda',
        'Gabtoli', 'Shyamoli', 'Asad Gate', 'Farmgate',
        'Mohammadpur',
        'Gulshan 1', 'Gulshan 2', 'Banani',
    ]


def test_every_result_contains_query(index):
    for query in ('a', 'ul', 'SH', ' ', '1'):
        for name in index.search(query):
            assert query.lower() in name.lower()


def test_empty_query_returns_nothing(index):
    assert index.search('') == []


def test_no_match(index):
    assert index.search('sylhet') == []


def test_limit_fifty():
    catalog = RouteCatalog([{'routes': [f"Stop {i}" for i in range(120)]}])
    results = LocationIndex(catalog).search('stop')
    assert len(results) == 50
    assert results[0] == 'Stop 0'
    assert results[-1] == 'Stop 49'


def test_custom_limit(index):
    assert LocationIndex(index.catalog, limit=2).search('a') == ['Postogola', 'Jatrabari']


def test_legacy_record_searchable():
    catalog = RouteCatalog([{'route': 'Dhaka → Sylhet'}])
    assert LocationIndex(catalog).search('syl') == ['Sylhet']


def test_case_variants_listed_separately():
    catalog = RouteCatalog([{'routes': ['Farmgate', 'Shahbag']}, {'routes': ['farmgate', 'Motijheel']}])
    assert LocationIndex(catalog).search('farm') == ['Farmgate', 'farmgate']


def test_unloaded_catalog_degrades_to_empty():
    catalog = RouteCatalog()
    index = LocationIndex(catalog)
    assert index.search('dha') == []

    catalog.load([{'routes': ['Dhaka', 'Chittagong']}])
    assert index.search('dha') == ['Dhaka']


def test_zero_limit_returns_nothing():
    catalog = RouteCatalog([{'routes': ['Dhaka', 'Dhanmondi']}])
    assert LocationIndex(catalog, limit=0).search('dh') == []


def test_limit_one_stops_after_first_match():
    catalog = RouteCatalog([{'routes': ['Dhaka', 'Dhanmondi']}])
    assert LocationIndex(catalog, limit=1).search('dh') == ['Dhaka']


def test_non_string_query_returns_nothing(index):
    assert index.search(None) == []
