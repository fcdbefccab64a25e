"""Authentication for daily-sage."""

from .provider import (
    DEMO_IDENTITY,
    AuthProvider,
    LocalAuthProvider,
    SessionAuthProvider,
    Subscription,
    create_auth_provider,
)

__all__ = [
    "AuthProvider",
    "create_auth_provider",
    "DEMO_IDENTITY",
    "LocalAuthProvider",
    "SessionAuthProvider",
    "Subscription",
]
