"""
Load catalog: dataset reader and in-memory search.

- loader.py: reads the load board export once (degrades to empty on failure)
- catalog.py: LoadCatalog with get_all / get_by_id / search
"""

from carrier_sales.loads.catalog import LoadCatalog, filter_loads
from carrier_sales.loads.loader import load_loads, parse_loads

__all__ = [
    "LoadCatalog",
    "filter_loads",
    "load_loads",
    "parse_loads",
]
