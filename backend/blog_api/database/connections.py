"""
Document store connection management.
"""
from typing import Optional

from blog_api.config import get_settings
from blog_api.database.store import JsonStore

# Global store instance
_store: Optional[JsonStore] = None


async def get_store() -> JsonStore:
    """Get or create the JSON document store."""
    global _store
    if _store is None:
        settings = get_settings()
        _store = JsonStore(settings.data_file)
    return _store


async def close_store():
    """Drop the store instance so the next request rebuilds it from settings."""
    global _store
    _store = None
