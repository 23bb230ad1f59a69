from .auth import (
    DEFAULT_ACCOUNTS,
    Account,
    AuthSession,
    AuthStore,
    BearerAuthDependency,
    extract_bearer_token,
    require_auth,
)

__all__ = [
    "DEFAULT_ACCOUNTS",
    "Account",
    "AuthSession",
    "AuthStore",
    "BearerAuthDependency",
    "extract_bearer_token",
    "require_auth",
]
