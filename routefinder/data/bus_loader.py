"""
Bus Data Loader
===============
Reads the ``{"data": [...]}`` bus dataset from a local file or a URL.

A failed load never propagates: it is logged and the caller gets an
empty dataset, so search and autocomplete keep working.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import requests

from .catalog import RouteCatalog
from ..config import DEFAULT_DATA_FILE, HTTP_TIMEOUT, HEADERS

logger = logging.getLogger(__name__)


class BusDataLoader:
    """
    Loader for the bus dataset.

    Usage:
        loader = BusDataLoader('data/bus.json')
        catalog = loader.load_catalog()

        # Or from a hosted copy
        loader = BusDataLoader('https://example.org/bus.json')
        records = loader.load_records()
    """

    def __init__(self, source: Optional[Union[str, Path]] = None, timeout: float = HTTP_TIMEOUT):
        """
        Initialize the loader.

        Args:
            source: Path or http(s) URL of the JSON document.
                    Defaults to the project's data/bus.json.
            timeout: Request timeout in seconds for URL sources
        """
        self.source = source if source is not None else DEFAULT_DATA_FILE
        self.timeout = timeout

    @property
    def is_remote(self) -> bool:
        return isinstance(self.source, str) and self.source.startswith(('http://', 'https://'))

    def _fetch(self) -> Any:
        logger.info(f"Fetching bus data from {self.source}")
        response = requests.get(self.source, headers=HEADERS, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _read(self) -> Any:
        path = Path(self.source)
        logger.info(f"Loading bus data from {path}")
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def load_document(self) -> Dict[str, Any]:
        """
        Load the raw JSON document.

        Returns:
            The decoded document, or ``{"data": []}`` if it could not
            be loaded
        """
        try:
            document = self._fetch() if self.is_remote else self._read()
        except (OSError, ValueError, requests.RequestException) as e:
            logger.error(f"Error loading bus data: {e}")
            return {'data': []}

        if not isinstance(document, dict):
            logger.error(f"Error loading bus data: expected an object, got {type(document).__name__}")
            return {'data': []}
        return document

    def load_records(self) -> List[Any]:
        """Load the list of raw service records."""
        data = self.load_document().get('data')
        if not isinstance(data, list):
            return []
        logger.info(f"  Loaded {len(data):,} records")
        return data

    def load_catalog(self) -> RouteCatalog:
        """Load the dataset into a new RouteCatalog."""
        return RouteCatalog(self.load_records())
