"""Authentication providers emitting the current identity as a change feed."""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Awaitable, Callable

from ..config import BackendKind
from ..db.stores import DataStore
from ..exceptions import DailySageError, ErrorCode
from ..models.user_profile import Identity

logger = logging.getLogger(__name__)

# Receives the identity (or None) on subscription and on every change
AuthCallback = Callable[[Identity | None], Awaitable[None]]

DEMO_IDENTITY = Identity(
    uid="mock-123",
    display_name="Demo User",
    email="demo@example.com",
    photo_url="https://picsum.photos/200",
)


class Subscription:
    """Handle for a live auth subscription."""

    def __init__(self, provider: "AuthProvider", callback: AuthCallback):
        self._provider = provider
        self.callback = callback

    @property
    def active(self) -> bool:
        return self._provider._subscription is self

    def unsubscribe(self) -> None:
        """Stop receiving identity changes. Safe to call more than once."""
        if self.active:
            self._provider._subscription = None


class AuthProvider(ABC):
    """Identity source with a single live subscriber."""

    def __init__(self, store: DataStore):
        self.store = store
        self._subscription: Subscription | None = None

    async def current_identity(self) -> Identity | None:
        return await self.store.get_identity()

    async def subscribe(self, callback: AuthCallback) -> Subscription:
        """Subscribe to identity changes.

        The callback is invoked immediately with the current identity. A new
        subscription replaces any previous one.
        """
        if self._subscription is not None:
            logger.warning("Replacing an existing auth subscription")
        subscription = Subscription(self, callback)
        self._subscription = subscription
        await callback(await self.current_identity())
        return subscription

    async def _notify(self) -> None:
        """Re-emit the full current state to the subscriber."""
        if self._subscription is not None:
            await self._subscription.callback(await self.current_identity())

    @abstractmethod
    async def login(self, **credentials) -> Identity:
        """Sign in and return the new identity."""

    async def logout(self) -> None:
        """Sign out the current identity."""
        await self.store.clear_identity()
        logger.info("Signed out")
        await self._notify()


class LocalAuthProvider(AuthProvider):
    """Mock-mode auth: login always yields the fixed demo identity."""

    async def login(self, **credentials) -> Identity:
        await self.store.set_identity(DEMO_IDENTITY)
        logger.info("Signed in as demo user %s", DEMO_IDENTITY.uid)
        await self._notify()
        return DEMO_IDENTITY


class SessionAuthProvider(AuthProvider):
    """Remote-mode auth: identity derived from an email, kept per session."""

    async def login(
        self,
        email: str | None = None,
        display_name: str | None = None,
        photo_url: str | None = None,
        **credentials,
    ) -> Identity:
        if not email:
            raise DailySageError(
                "An email address is required to sign in",
                code=ErrorCode.VALIDATION_ERROR,
                status_code=400,
                details={"field": "email"},
            )

        email = email.strip().lower()
        identity = Identity(
            uid=str(uuid.uuid5(uuid.NAMESPACE_URL, f"mailto:{email}")),
            display_name=display_name,
            email=email,
            photo_url=photo_url,
        )
        await self.store.set_identity(identity)
        logger.info("Signed in %s as %s", email, identity.uid)
        await self._notify()
        return identity


def create_auth_provider(store: DataStore) -> AuthProvider:
    """Pick the auth provider matching the store's backend."""
    if store.kind == BackendKind.REMOTE:
        return SessionAuthProvider(store)
    return LocalAuthProvider(store)
