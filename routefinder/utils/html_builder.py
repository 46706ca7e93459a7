"""
HTML Builder Utilities
======================
Markup for route search results and suggestion lists.
"""

from html import escape
from typing import Iterable, Optional

from ..data.catalog import ServiceRecord
from ..search.suggestions import SuggestionSession

NO_ROUTES_MESSAGE = "No direct routes found"
RESULTS_HEADING = "Available Routes:"


def get_base_styles() -> str:
    """
    Return the CSS shared by generated pages.

    Includes:
    - Dark theme base styles
    - Result card styling
    - Suggestion list styling
    - Status and error messages
    """
    return '''
        * { margin: 0; padding: 0; box-sizing: border-box; }
        
        body {
            font-family: 'Inter', system-ui, -apple-system, sans-serif;
            background: #0f172a;
            color: #f1f5f9;
        }
        
        .container { max-width: 800px; margin: 0 auto; padding: 40px 20px; }
        
        h2 {
            font-size: 1.5rem;
            font-weight: 700;
            margin-bottom: 16px;
        }
        
        /* Result cards */
        .route-card {
            background: #1e293b;
            border: 1px solid #334155;
            border-radius: 12px;
            padding: 24px;
            margin-bottom: 16px;
        }
        
        .route-card h3 {
            font-size: 1.25rem;
            font-weight: 600;
            margin-bottom: 8px;
        }
        
        .route-card p { color: #cbd5e1; margin-bottom: 8px; }
        
        .route-card img {
            max-width: 200px;
            margin-top: 16px;
            border-radius: 8px;
        }
        
        /* Suggestion list */
        .suggestions {
            background: #1e293b;
            border: 1px solid #334155;
            border-radius: 8px;
            max-height: 240px;
            overflow-y: auto;
        }
        
        .suggestion { padding: 8px 16px; cursor: pointer; }
        .suggestion:hover { background: #334155; }
        .suggestion.active { background: #475569; }
        
        /* Status messages */
        .status-msg {
            color: #94a3b8;
            text-align: center;
            padding: 20px;
        }
        
        .error-msg { color: #f87171; }
    '''


def get_page_head(title: str, extra_styles: str = "") -> str:
    """
    Generate the HTML <head> section.
    
    Args:
        title: Page title
        extra_styles: Additional CSS to include
        
    Returns:
        HTML string for the <head> section
    """
    return f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)} - Bus Route Finder</title>
    <link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;600;700&display=swap" rel="stylesheet">
    <style>
        {get_base_styles()}
        {extra_styles}
    </style>
</head>'''


def build_page(title: str, body_content: str, extra_styles: str = "") -> str:
    """
    Generate a complete HTML page.
    
    Args:
        title: Page title
        body_content: HTML content for the body
        extra_styles: Additional CSS styles
        
    Returns:
        Complete HTML page as string
    """
    return f'''{get_page_head(title, extra_styles)}
<body>
    <div class="container">
    {body_content}
    </div>
</body>
</html>'''


def _detail(label: str, value: Optional[str]) -> str:
    if not value:
        return ''
    return f'<p><strong>{label}:</strong> {escape(value)}</p>'


def render_record(record: ServiceRecord) -> str:
    """Render one service as a result card."""
    name = escape(record.display_name)
    local_name = f' ({escape(record.local_name)})' if record.local_name else ''
    image = (
        f'<img src="{escape(record.image)}" alt="{name}">'
        if record.image else ''
    )
    return f'''
        <div class="route-card">
            <h3>{name}{local_name}</h3>
            <p><strong>Route:</strong> {escape(record.route_text)}</p>
            {_detail('Service Type', record.service_type)}
            {_detail('Time', record.time)}
            {image}
        </div>'''


def render_results(records: Iterable[ServiceRecord]) -> str:
    """
    Render search results.

    Args:
        records: Matching services, in display order

    Returns:
        Heading plus one card per service, or the no-routes message
    """
    records = list(records)
    if not records:
        return f'<p class="status-msg">{NO_ROUTES_MESSAGE}</p>'

    cards = ''.join(render_record(record) for record in records)
    return f'<h2>{RESULTS_HEADING}</h2>{cards}'


def render_error(message: str) -> str:
    """Render a validation message."""
    return f'<p class="error-msg">{escape(message)}</p>'


def render_suggestions(session: SuggestionSession) -> str:
    """
    Render a session's candidate list.

    Returns:
        The list markup with the active item marked, or an empty
        string while the list is closed
    """
    if not session.visible:
        return ''

    items = []
    for idx, candidate in enumerate(session.candidates):
        css = 'suggestion active' if idx == session.active_index else 'suggestion'
        items.append(f'<div class="{css}" data-index="{idx}" tabindex="0">{escape(candidate)}</div>')
    return f'<div class="suggestions">{"".join(items)}</div>'
