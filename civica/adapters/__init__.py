"""
Adapters package for Civica.

This package contains all data source adapters that implement
the BaseAdapter interface.
"""

from .base_adapter import BaseAdapter, is_transient_error
from .govtrack_bills import GovTrackBillsAdapter
from .newsapi import NewsAPIAdapter
from .legislator_directory import LegislatorDirectoryAdapter
from .town_halls import TownHallAdapter

__all__ = [
    "BaseAdapter",
    "is_transient_error",
    "GovTrackBillsAdapter",
    "NewsAPIAdapter",
    "LegislatorDirectoryAdapter",
    "TownHallAdapter",
]
