"""Tests for loading the dataset from disk and over HTTP."""

import json
import logging

import pytest
import requests

from routefinder.data import BusDataLoader


DOCUMENT = {'data': [{'english': 'Raida', 'routes': ['Badda', 'Rampura']}]}


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / 'bus.json'
    path.write_text(json.dumps(DOCUMENT, ensure_ascii=False), encoding='utf-8')
    return path


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


def test_load_from_file(data_file):
    loader = BusDataLoader(data_file)
    assert not loader.is_remote
    assert loader.load_records() == DOCUMENT['data']


def test_load_catalog(data_file):
    catalog = BusDataLoader(str(data_file)).load_catalog()
    assert list(catalog.locations()) == ['Badda', 'Rampura']


def test_missing_file_degrades_to_empty(tmp_path, caplog):
    loader = BusDataLoader(tmp_path / 'missing.json')
    with caplog.at_level(logging.ERROR):
        assert loader.load_document() == {'data': []}
    assert 'Error loading bus data' in caplog.text
    assert len(loader.load_catalog()) == 0


def test_invalid_json_degrades_to_empty(tmp_path):
    path = tmp_path / 'bus.json'
    path.write_text('{not json', encoding='utf-8')
    assert BusDataLoader(path).load_records() == []


def test_non_object_document(tmp_path):
    path = tmp_path / 'bus.json'
    path.write_text('[1, 2, 3]', encoding='utf-8')
    assert BusDataLoader(path).load_document() == {'data': []}


def test_missing_data_key(tmp_path):
    path = tmp_path / 'bus.json'
    path.write_text('{"items": []}', encoding='utf-8')
    assert BusDataLoader(path).load_records() == []


def test_load_from_url(monkeypatch):
    calls = {}

    def fake_get(url, headers=None, timeout=None):
        calls['url'] = url
        calls['timeout'] = timeout
        return FakeResponse(DOCUMENT)

    monkeypatch.setattr(requests, 'get', fake_get)
    loader = BusDataLoader('https://example.org/bus.json', timeout=5)

    assert loader.is_remote
    assert loader.load_records() == DOCUMENT['data']
    assert calls == {'url': 'https://example.org/bus.json', 'timeout': 5}


def test_http_error_degrades_to_empty(monkeypatch):
    monkeypatch.setattr(requests, 'get', lambda *a, **kw: FakeResponse({}, status_code=404))
    assert BusDataLoader('http://example.org/bus.json').load_records() == []


def test_connection_error_degrades_to_empty(monkeypatch):
    def fail(*args, **kwargs):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(requests, 'get', fail)
    assert len(BusDataLoader('https://example.org/bus.json').load_catalog()) == 0
