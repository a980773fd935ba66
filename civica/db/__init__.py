"""
Storage package for Civica.

Provides the in-memory table primitive, query helpers and the repository
pattern for data access. ``MemoryStore`` lives in ``civica.db.store``.
"""

from .table import MemoryTable, Page, paginate
from .query import contains, equals_ci, newest_first, normalize_ip, oldest_first, voter_identity

__all__ = [
    "MemoryTable",
    "Page",
    "paginate",
    "contains",
    "equals_ci",
    "newest_first",
    "normalize_ip",
    "oldest_first",
    "voter_identity",
]
