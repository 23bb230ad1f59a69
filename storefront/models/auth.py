"""Authentication models"""

from typing import Optional

from .common import ApiModel


class AuthUser(ApiModel):
    """Principal attached to an authenticated request"""
    id: str
    email: str
    name: str


class LoginRequest(ApiModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(ApiModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: int
    user: AuthUser


class CurrentUserResponse(ApiModel):
    user: AuthUser


class MessageResponse(ApiModel):
    message: str
