"""
Data Loading Modules
====================
Bus dataset loading and normalization.
"""

from .catalog import RouteCatalog, ServiceRecord, LocationSet, parse_stops
from .bus_loader import BusDataLoader

__all__ = ['RouteCatalog', 'ServiceRecord', 'LocationSet', 'parse_stops', 'BusDataLoader']
