"""
Authentication router for registration and login.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from blog_api.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from blog_api.database.connections import get_store
from blog_api.database.store import JsonStore
from blog_api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from blog_api.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["Authentication"])


async def get_auth_service(store: JsonStore = Depends(get_store)) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(store)


@router.post(
    "/register",
    response_model=RegisterResponse,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.

    - **username**: Username (must be unique, case-sensitive)
    - **password**: Password

    New accounts are never admins.
    """
    try:
        return await auth_service.register_user(body.username, body.password)
    except (ValidationError, ConflictError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with username and password to receive a JWT token.

    The token is valid for 7 days and must be sent to protected endpoints
    as `Authorization: Bearer <token>`.
    """
    try:
        return await auth_service.login(body.username, body.password)
    except (NotFoundError, AuthError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
