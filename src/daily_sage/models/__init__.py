"""Data models for daily-sage."""

from .journal import JournalEntry
from .routine import FALLBACK_TIP, HealthTip, RoutineCategory, RoutineItem, TimeOfDay
from .user_profile import (
    ActivityLevel,
    DietType,
    Gender,
    Identity,
    ProfileDraft,
    UserProfile,
    calculate_age,
    calculate_bmi,
)

__all__ = [
    "ActivityLevel",
    "calculate_age",
    "calculate_bmi",
    "DietType",
    "FALLBACK_TIP",
    "Gender",
    "HealthTip",
    "Identity",
    "JournalEntry",
    "ProfileDraft",
    "RoutineCategory",
    "RoutineItem",
    "TimeOfDay",
    "UserProfile",
]
