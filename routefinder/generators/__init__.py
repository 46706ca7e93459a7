"""
Generators package.
Contains HTML page generators.
"""

from .base import BaseGenerator
from .results_page import ResultsPageGenerator

__all__ = [
    'BaseGenerator',
    'ResultsPageGenerator',
]
