"""Authentication routes"""

from fastapi import APIRouter, Depends, Request

from ..core.errors import BadRequestError, UnauthorizedError
from ..dependencies import get_auth_store
from ..models.auth import AuthUser, CurrentUserResponse, LoginRequest, LoginResponse, MessageResponse
from ..security.auth import AuthStore, require_auth

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, auth_store: AuthStore = Depends(get_auth_store)):
    """Exchange email and password for a bearer token"""
    if not request.email or not request.password:
        raise BadRequestError("Email and password are required")

    session = auth_store.authenticate(request.email, request.password)
    if not session:
        raise UnauthorizedError("Invalid email or password")

    return LoginResponse(
        access_token=session.token,
        token_type="Bearer",
        expires_in=auth_store.token_ttl_seconds,
        user=session.user,
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    user: AuthUser = Depends(require_auth),
    auth_store: AuthStore = Depends(get_auth_store),
):
    """Invalidate the caller's token"""
    auth_store.logout(request.state.token)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=CurrentUserResponse)
async def me(user: AuthUser = Depends(require_auth)):
    """Return the authenticated principal"""
    return CurrentUserResponse(user=user)
