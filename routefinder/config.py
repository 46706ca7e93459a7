"""
Configuration and Constants
============================
Centralized configuration for the Bus Route Finder.
"""

from pathlib import Path

# ============================================================================
# PATHS
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
OUTPUT_DIR = PROJECT_ROOT / "outputs"

DEFAULT_DATA_FILE = DATA_DIR / "bus.json"
RESULTS_FILENAME = "results.html"

# ============================================================================
# DATASET FORMAT
# ============================================================================

# Legacy "route" strings join stops with any of these tokens
ROUTE_SEPARATOR_PATTERN = r"⇄|→|-"

# Used to display a structured stop list as a single line
ROUTE_DISPLAY_JOINER = " ⇄ "

UNNAMED_SERVICE = "Unnamed"

# ============================================================================
# SEARCH PARAMETERS
# ============================================================================

# Maximum number of suggestions shown for a partial location name
SUGGESTION_LIMIT = 50

# ============================================================================
# DATA LOADING
# ============================================================================

HTTP_TIMEOUT = 30  # seconds

HEADERS = {
    'User-Agent': 'bus-route-finder/1.0',
    'Accept': 'application/json',
}

# ============================================================================
# LOGGING
# ============================================================================

LOG_FORMAT = '%(message)s'
VERBOSE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
