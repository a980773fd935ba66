"""
Repository for user bookmarks.

Responsibility: Bookmark create/list/delete
"""

from typing import List, Optional

from ..query import newest_first
from ..table import MemoryTable
from ...models.user import Bookmark, BookmarkCreate


class BookmarkRepository:
    def __init__(self, table: MemoryTable[Bookmark]):
        self.table = table

    def create(self, data: BookmarkCreate) -> Bookmark:
        """Bookmark an item. Bookmarking the same item twice returns the existing row."""
        for existing in self.table.values():
            if (existing.user_id, existing.item_type, existing.item_id) == (
                data.user_id, data.item_type, data.item_id
            ):
                return existing
        return self.table.put(Bookmark(**data.model_dump()))

    def get(self, bookmark_id: str) -> Optional[Bookmark]:
        return self.table.get(bookmark_id)

    def for_user(self, user_id: str) -> List[Bookmark]:
        """A user's bookmarks, newest first."""
        return newest_first(
            self.table.where(lambda bookmark: bookmark.user_id == user_id),
            lambda bookmark: bookmark.created_at,
        )

    def delete(self, bookmark_id: str) -> bool:
        return self.table.delete(bookmark_id)
