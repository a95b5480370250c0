"""
Authentication request/response schemas.
"""
from pydantic import BaseModel, ConfigDict, Field

from blog_api.models.user import User


class RegisterRequest(BaseModel):
    """Registration request body."""
    username: str = Field(default="", description="Desired username (must be unique)")
    password: str = Field(default="", description="Plain text password")


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(default="", description="Username")
    password: str = Field(default="", description="Plain text password")


class PublicUser(BaseModel):
    """User projection safe to return to clients (no password hash)."""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    is_admin: bool = Field(..., alias="isAdmin", description="Admin flag")

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls(id=user.id, username=user.username, is_admin=user.is_admin)


class RegisterResponse(BaseModel):
    """Registration response."""
    message: str = Field(default="Registration successful", description="Success message")
    user: PublicUser = Field(..., description="The registered user")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    message: str = Field(default="Login successful", description="Success message")
    token: str = Field(..., description="JWT bearer token")
    user: PublicUser = Field(..., description="The authenticated user")


class TokenClaims(BaseModel):
    """Identity claims carried by a decoded JWT token."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(..., alias="userId", description="User ID")
    username: str = Field(..., description="Username at login time")
    is_admin: bool = Field(default=False, alias="isAdmin", description="Admin flag at login time")
