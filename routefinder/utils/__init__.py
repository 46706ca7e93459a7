"""
Utility Modules
===============
Shared HTML rendering helpers.
"""

from .html_builder import (
    build_page,
    get_base_styles,
    render_error,
    render_record,
    render_results,
    render_suggestions,
)

__all__ = [
    'build_page',
    'get_base_styles',
    'render_error',
    'render_record',
    'render_results',
    'render_suggestions',
]
