"""
Bearer token authentication

Issues opaque session tokens for known accounts and resolves them back to a
principal. Route protection is a FastAPI dependency reading the
``Authorization: Bearer <token>`` header.
"""

import hmac
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Request

from ..core.errors import UnauthorizedError
from ..database.seed import ALICE_ID, BOB_ID
from ..models.auth import AuthUser
from ..models.common import utcnow

logger = logging.getLogger(__name__)


@dataclass
class Account:
    """Login credentials for a principal"""
    password: str
    user: AuthUser


@dataclass
class AuthSession:
    """Issued token and its owner"""
    token: str
    user: AuthUser
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or utcnow()) > self.expires_at


# Demo accounts; each maps onto a seeded store user
DEFAULT_ACCOUNTS: dict[str, Account] = {
    "alice@example.com": Account(
        password="password123",
        user=AuthUser(id=ALICE_ID, email="alice@example.com", name="Alice Johnson"),
    ),
    "bob@example.com": Account(
        password="password456",
        user=AuthUser(id=BOB_ID, email="bob@example.com", name="Bob Smith"),
    ),
}


class AuthStore:
    """In-memory account and session storage"""

    def __init__(
        self,
        accounts: Optional[dict[str, Account]] = None,
        token_ttl_seconds: int = 86400,
    ):
        self.accounts: dict[str, Account] = dict(accounts) if accounts is not None else {}
        self.sessions: dict[str, AuthSession] = {}
        self.token_ttl_seconds = token_ttl_seconds

    def authenticate(self, email: str, password: str) -> Optional[AuthSession]:
        """Issue a session token for valid credentials, or None"""
        account = self.accounts.get(email)
        if not account or not hmac.compare_digest(account.password.encode(), password.encode()):
            logger.warning(f"Login failed for {email}")
            return None

        session = AuthSession(
            token=str(uuid.uuid4()),
            user=account.user,
            expires_at=utcnow() + timedelta(seconds=self.token_ttl_seconds),
        )
        self.sessions[session.token] = session
        logger.info(f"Issued token for {email}")
        return session

    def validate(self, token: str) -> Optional[AuthUser]:
        """Resolve a token to its principal; expired tokens are dropped"""
        session = self.sessions.get(token)
        if not session:
            return None

        if session.is_expired():
            del self.sessions[token]
            return None

        return session.user

    def logout(self, token: str) -> bool:
        return self.sessions.pop(token, None) is not None

    def cleanup_expired_tokens(self) -> int:
        """Remove expired sessions, returning how many were dropped"""
        now = utcnow()
        expired = [token for token, session in self.sessions.items() if session.is_expired(now)]
        for token in expired:
            del self.sessions[token]
        return len(expired)


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Pull the token out of an Authorization header value"""
    if not authorization:
        raise UnauthorizedError("Missing Authorization header")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise UnauthorizedError("Invalid Authorization header format")

    return parts[1]


class BearerAuthDependency:
    """
    FastAPI dependency enforcing bearer token authentication.

    Stores the principal and token on ``request.state`` so downstream
    handlers can read them, and returns the principal.
    """

    async def __call__(self, request: Request) -> AuthUser:
        token = extract_bearer_token(request.headers.get("Authorization"))

        auth_store: AuthStore = request.app.state.auth_store
        user = auth_store.validate(token)
        if not user:
            logger.warning(f"Rejected token on {request.method} {request.url.path}")
            raise UnauthorizedError("Invalid or expired token")

        request.state.user = user
        request.state.token = token
        return user


require_auth = BearerAuthDependency()
