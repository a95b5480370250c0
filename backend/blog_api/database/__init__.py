"""
Database module - JSON document store and its process-wide accessor.
"""
from blog_api.database.connections import get_store, close_store
from blog_api.database.store import JsonStore

__all__ = [
    "get_store",
    "close_store",
    "JsonStore",
]
