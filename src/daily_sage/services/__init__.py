"""Application flows for daily-sage."""

from .controller import AppController, View
from .dashboard import DashboardSession
from .onboarding import OnboardingFlow, OnboardingResult

__all__ = [
    "AppController",
    "DashboardSession",
    "OnboardingFlow",
    "OnboardingResult",
    "View",
]
