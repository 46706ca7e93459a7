"""Tests for result and suggestion markup."""

from routefinder.data import RouteCatalog, ServiceRecord
from routefinder.errors import InputError
from routefinder.generators import ResultsPageGenerator
from routefinder.utils import build_page, render_error, render_results, render_suggestions


def test_render_results_cards(catalog):
    html = render_results([catalog.records[0]])
    assert 'Available Routes:' in html
    assert 'Raida (রাইদা)' in html
    assert 'Postogola ⇄ Jatrabari ⇄ Malibagh ⇄ Rampura ⇄ Badda' in html
    assert '<strong>Service Type:</strong> Sitting Service' in html
    assert '<strong>Time:</strong> 6:00 AM - 11:00 PM' in html
    assert '<img' not in html


def test_render_results_optional_fields(catalog):
    html = render_results([catalog.records[3]])
    assert 'Service Type' not in html
    assert 'Time:' not in html
    assert '<img src="img/chaka.png" alt="Dhaka Chaka">' in html


def test_render_results_unnamed():
    html = render_results([ServiceRecord.from_raw({'route': 'A - B'})])
    assert '<h3>Unnamed</h3>' in html


def test_render_results_escapes_text():
    record = ServiceRecord.from_raw({'english': '<b>Bus</b>', 'routes': ['A & B', 'C']})
    html = render_results([record])
    assert '&lt;b&gt;Bus&lt;/b&gt;' in html
    assert 'A &amp; B' in html


def test_render_no_results():
    assert 'No direct routes found' in render_results([])


def test_render_error():
    assert render_error(InputError().message) == '<p class="error-msg">Please enter both locations</p>'


def test_render_suggestions(session):
    assert render_suggestions(session) == ''
    session.text_changed('gate')
    session.arrow_down()
    html = render_suggestions(session)
    assert '<div class="suggestion active" data-index="0" tabindex="0">Asad Gate</div>' in html
    assert '<div class="suggestion" data-index="1" tabindex="0">Farmgate</div>' in html


def test_build_page():
    page = build_page('Results', '<p>hi</p>')
    assert page.startswith('<!DOCTYPE html>')
    assert '<title>Results - Bus Route Finder</title>' in page
    assert '<p>hi</p>' in page


def test_results_page_generator(catalog, tmp_path):
    output = ResultsPageGenerator('asad', 'farmgate', catalog).save(tmp_path / 'out' / 'results.html')
    html = output.read_text(encoding='utf-8')
    assert 'Achim Paribahan' in html
    assert 'Torongo Plus' in html
    assert '<title>asad to farmgate - Bus Route Finder</title>' in html


def test_results_page_generator_input_error():
    html = ResultsPageGenerator('', 'Dhaka', RouteCatalog()).generate()
    assert 'Please enter both locations' in html
