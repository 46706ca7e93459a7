"""
Page Generators
===============
Shared plumbing for pages rendered from a route catalog.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional
import logging

from ..data.catalog import RouteCatalog
from ..data.bus_loader import BusDataLoader
from ..config import OUTPUT_DIR

logger = logging.getLogger(__name__)


class BaseGenerator(ABC):
    """
    A page built from the bus catalog.

    Subclasses set ``output_filename`` and return markup from
    ``generate()``; ``save()`` writes it out.
    """

    output_filename = "page.html"

    def __init__(self, catalog: Optional[RouteCatalog] = None):
        """
        Args:
            catalog: Catalog to read services from. Without one, the
                     default bus.json is loaded.
        """
        self.catalog = catalog if catalog is not None else BusDataLoader().load_catalog()

    @abstractmethod
    def generate(self) -> str:
        """Return the page markup."""

    def save(self, output_path: Optional[Path] = None) -> Path:
        """
        Render the page and write it as UTF-8.

        Args:
            output_path: Destination file. Defaults to
                         ``OUTPUT_DIR / output_filename``; missing parent
                         directories are created.

        Returns:
            Path of the written page
        """
        path = Path(output_path) if output_path is not None else OUTPUT_DIR / self.output_filename
        path.parent.mkdir(parents=True, exist_ok=True)

        path.write_text(self.generate(), encoding='utf-8')
        logger.info(f"Wrote {path} ({path.stat().st_size / 1024:.1f} KB)")
        return path
