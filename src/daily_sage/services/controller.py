"""Top-level controller deciding between login, onboarding and dashboard."""

import logging
from datetime import date
from enum import Enum
from typing import Callable

from ..auth.provider import AuthProvider, Subscription, create_auth_provider
from ..config import Settings
from ..db.stores import DataStore, create_store
from ..exceptions import InvalidTransitionError, NotAuthenticatedError
from ..generation.client import ContentGenerator
from ..models.user_profile import Identity, ProfileDraft, UserProfile
from .dashboard import DashboardSession
from .onboarding import OnboardingFlow

logger = logging.getLogger(__name__)


class View(str, Enum):
    """Screen the application is showing."""

    LOADING = "loading"
    LOGIN = "login"
    ONBOARDING = "onboarding"
    DASHBOARD = "dashboard"


class AppController:
    """Routes between views from auth state and profile presence.

    Owns the single auth subscription for its lifetime: ``start`` opens it,
    ``stop`` closes it.
    """

    def __init__(
        self,
        auth: AuthProvider,
        store: DataStore,
        generator: ContentGenerator,
        today: Callable[[], date] = date.today,
    ):
        self.auth = auth
        self.store = store
        self.generator = generator
        self._today = today

        self.view = View.LOADING
        self.identity: Identity | None = None
        self.profile: UserProfile | None = None
        self.onboarding: OnboardingFlow | None = None
        self.dashboard: DashboardSession | None = None
        self._subscription: Subscription | None = None

    async def start(self) -> None:
        """Subscribe to auth changes; the first state arrives immediately."""
        if self._subscription is None:
            self._subscription = await self.auth.subscribe(self._on_auth_changed)

    def stop(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    async def _on_auth_changed(self, identity: Identity | None) -> None:
        self.identity = identity
        self.dashboard = None
        self.onboarding = None

        if identity is None:
            self.profile = None
            self.view = View.LOGIN
            return

        self.profile = await self.store.get_profile(identity.uid)
        if self.profile is not None:
            self.view = View.DASHBOARD
        else:
            self.onboarding = OnboardingFlow()
            self.view = View.ONBOARDING
        logger.info("Auth state for %s routed to %s", identity.uid, self.view.value)

    async def login(self, **credentials) -> Identity:
        return await self.auth.login(**credentials)

    async def logout(self) -> None:
        await self.auth.logout()

    def edit_profile(self) -> OnboardingFlow:
        """Re-open onboarding seeded with the current profile."""
        if self.view != View.DASHBOARD or self.profile is None:
            raise InvalidTransitionError("Profile can only be edited from the dashboard", state=self.view.value)
        self.onboarding = OnboardingFlow(self.profile)
        self.dashboard = None
        self.view = View.ONBOARDING
        return self.onboarding

    async def complete_onboarding(self, draft: ProfileDraft) -> UserProfile:
        """Merge the finished draft with the identity, save it and open the dashboard.

        Answers cleared in the draft are removed from the stored profile. The
        cached routine set is dropped so the next dashboard load builds
        one from the updated answers.
        """
        if self.identity is None:
            raise NotAuthenticatedError()
        if self.view != View.ONBOARDING:
            raise InvalidTransitionError("Onboarding is not in progress", state=self.view.value)

        profile = UserProfile.from_draft(self.identity, draft)
        await self.store.save_profile(profile, clear_unset=True)
        await self.store.clear_routines(profile.uid)

        self.profile = await self.store.get_profile(profile.uid) or profile
        self.onboarding = None
        self.view = View.DASHBOARD
        return self.profile

    async def onboarding_next(self) -> UserProfile | None:
        """Advance the questionnaire; completes onboarding after the last step."""
        if self.view != View.ONBOARDING or self.onboarding is None:
            raise InvalidTransitionError("Onboarding is not in progress", state=self.view.value)
        result = self.onboarding.next()
        if result is None:
            return None
        return await self.complete_onboarding(result.draft)

    async def open_dashboard(self, refresh: bool = False) -> DashboardSession:
        """Build and activate the dashboard for the current profile.

        An already open dashboard is reused unless ``refresh`` is set.
        """
        if self.view != View.DASHBOARD or self.profile is None:
            raise InvalidTransitionError("Dashboard is not available", state=self.view.value)
        if self.dashboard is None:
            self.dashboard = DashboardSession(self.store, self.generator, self.profile, today=self._today)
            refresh = True
        if refresh:
            await self.dashboard.activate()
        return self.dashboard

    def to_dict(self) -> dict:
        return {
            "view": self.view.value,
            "identity": self.identity.to_dict() if self.identity else None,
            "profile": self.profile.to_dict() if self.profile else None,
        }


def create_controller(settings: Settings) -> AppController:
    """Wire the store, auth provider and generator selected by settings."""
    store = create_store(settings)
    return AppController(
        auth=create_auth_provider(store),
        store=store,
        generator=ContentGenerator.from_settings(settings),
    )
