"""
Dependencies for dependency injection in routes.
"""
from blog_api.dependencies.auth import get_current_claims, CurrentClaims

__all__ = [
    "get_current_claims",
    "CurrentClaims",
]
