"""
API Routers module.
"""
from blog_api.routers import articles, auth, health

__all__ = ["articles", "auth", "health"]
