"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status

from blog_api.core.exceptions import AuthError
from blog_api.database.connections import get_store
from blog_api.database.store import JsonStore
from blog_api.schemas.auth import TokenClaims
from blog_api.services.auth_service import AuthService


async def get_current_claims(
    store: Annotated[JsonStore, Depends(get_store)],
    authorization: Annotated[
        Optional[str], Header(description="Bearer token: `Bearer <jwt>`")
    ] = None,
) -> TokenClaims:
    """
    Dependency to get the caller's identity claims from the bearer token.

    Token is passed in the header: ``Authorization: Bearer xxx``

    Raises:
        HTTPException 401: If the token is missing, invalid or expired
    """
    try:
        return AuthService(store).authenticate(authorization)
    except AuthError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )


# Type alias for cleaner route signatures
CurrentClaims = Annotated[TokenClaims, Depends(get_current_claims)]
