"""
Results Page Generator
======================
Writes a standalone HTML page listing the direct routes between two
locations.
"""

from typing import Optional

from .base import BaseGenerator
from ..config import RESULTS_FILENAME
from ..data.catalog import RouteCatalog
from ..errors import InputError
from ..search.matcher import RouteMatcher
from ..utils.html_builder import build_page, render_error, render_results


class ResultsPageGenerator(BaseGenerator):
    """Generator for a route search results page."""
    
    output_filename = RESULTS_FILENAME
    
    def __init__(self, from_query: str, to_query: str, catalog: Optional[RouteCatalog] = None):
        super().__init__(catalog)
        self.from_query = from_query
        self.to_query = to_query
    
    def generate(self) -> str:
        """Generate the results page HTML."""
        try:
            records = RouteMatcher(self.catalog).find_routes(self.from_query, self.to_query)
        except InputError as e:
            body = render_error(e.message)
        else:
            body = render_results(records)
        
        title = f"{self.from_query or '?'} to {self.to_query or '?'}"
        return build_page(title, body)
