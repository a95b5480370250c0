"""
Authentication service for user registration, login and token checks.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from jose import JWTError
from passlib.exc import PasswordValueError
from pydantic import ValidationError as SchemaError
from starlette.concurrency import run_in_threadpool

from blog_api.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from blog_api.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)
from blog_api.database.store import JsonStore
from blog_api.models.user import User
from blog_api.schemas.auth import LoginResponse, PublicUser, RegisterResponse, TokenClaims

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "Please log in first"
INVALID_TOKEN_MESSAGE = "Session expired, please log in again"


class AuthService:
    """Service for authentication operations."""

    def __init__(self, store: JsonStore):
        """Initialize with the document store."""
        self.store = store

    async def register_user(self, username: str, password: str) -> RegisterResponse:
        """
        Register a new user.

        Args:
            username: Desired username, unique and case-sensitive
            password: Plain text password

        Returns:
            RegisterResponse with the public view of the created user

        Raises:
            ValidationError: If username or password is empty,
                or the password cannot be hashed (e.g. contains a NUL byte)
            ConflictError: If the username is already taken
        """
        if not username or not password:
            raise ValidationError("Username and password are required")

        try:
            hashed_password = await run_in_threadpool(hash_password, password)
        except PasswordValueError:
            raise ValidationError("Password contains unsupported characters")

        async with self.store.transaction() as document:
            if document.find_user(username) is not None:
                raise ConflictError("Username already exists")

            user = User(
                id=document.next_id(),
                username=username,
                hashed_password=hashed_password,
                is_admin=False,
                created_at=datetime.now(timezone.utc),
            )
            document.users.append(user)

        logger.info("Registered user %r (id=%s)", user.username, user.id)
        return RegisterResponse(user=PublicUser.from_user(user))

    async def login(self, username: str, password: str) -> LoginResponse:
        """
        Authenticate user and return JWT token.

        Args:
            username: Account username
            password: Plain text password

        Returns:
            LoginResponse with JWT token and the public user

        Raises:
            NotFoundError: If no user has this username
            AuthError: If the password does not match
        """
        user = self.store.load().find_user(username)

        if user is None:
            raise NotFoundError("User does not exist")

        try:
            matches = await run_in_threadpool(verify_password, password, user.hashed_password)
        except PasswordValueError:
            matches = False

        if not matches:
            logger.warning("Failed login for user %r", username)
            raise AuthError("Incorrect password")

        token = create_access_token(
            user_id=user.id,
            username=user.username,
            is_admin=user.is_admin,
        )

        logger.info("User %r logged in", user.username)
        return LoginResponse(token=token, user=PublicUser.from_user(user))

    def authenticate(self, authorization: Optional[str]) -> TokenClaims:
        """
        Turn an ``Authorization: Bearer <token>`` header into identity claims.

        Claims are trusted as issued until the token expires; they are not
        re-checked against the stored user.

        Raises:
            AuthError: If no token is supplied, or it is invalid or expired
        """
        scheme, _, token = (authorization or "").strip().partition(" ")
        token = token.strip()

        if scheme.lower() != "bearer" or not token:
            raise AuthError(MISSING_TOKEN_MESSAGE)

        try:
            payload = decode_token(token)
            return TokenClaims.model_validate(payload)
        except (JWTError, SchemaError):
            raise AuthError(INVALID_TOKEN_MESSAGE)
