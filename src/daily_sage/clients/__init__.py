"""Interactive clients for collecting user input."""

from .questionnaire import OnboardingQuestionnaire

__all__ = ["OnboardingQuestionnaire"]
