"""Generated routine and health tip models."""

from dataclasses import dataclass
from enum import Enum


class RoutineCategory(str, Enum):
    """Area of health a routine item addresses."""

    EXERCISE = "exercise"
    DIET = "diet"
    SLEEP = "sleep"
    MENTAL = "mental"
    WORK = "work"


class TimeOfDay(str, Enum):
    """When in the day a routine item is scheduled."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    ANYTIME = "anytime"


def _require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass
class RoutineItem:
    """One schedulable self-care task."""

    id: str
    title: str
    description: str
    category: RoutineCategory
    time_of_day: TimeOfDay
    duration_minutes: int

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
            "timeOfDay": self.time_of_day.value,
            "durationMinutes": self.duration_minutes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RoutineItem":
        """Create from dictionary.

        Raises ValueError on unknown enum values, wrong types or a negative
        duration; records are rejected, never coerced.
        """
        duration = data.get("durationMinutes")
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            raise ValueError("'durationMinutes' must be a number")
        if duration < 0 or duration != int(duration):
            raise ValueError(f"'durationMinutes' must be a non-negative whole number, got {duration}")

        return cls(
            id=_require_str(data, "id"),
            title=_require_str(data, "title"),
            description=_require_str(data, "description"),
            category=RoutineCategory(data.get("category")),
            time_of_day=TimeOfDay(data.get("timeOfDay")),
            duration_minutes=int(duration),
        )


@dataclass
class HealthTip:
    """A cited piece of health guidance."""

    id: str
    title: str
    content: str  # markdown
    source_name: str
    source_url: str
    category: str

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "sourceName": self.source_name,
            "sourceUrl": self.source_url,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HealthTip":
        """Create from dictionary, rejecting records with missing or non-string fields."""
        source_url = _require_str(data, "sourceUrl")
        if not source_url.startswith(("http://", "https://")):
            raise ValueError(f"'sourceUrl' must be an http(s) URL, got {source_url!r}")

        return cls(
            id=_require_str(data, "id"),
            title=_require_str(data, "title"),
            content=_require_str(data, "content"),
            source_name=_require_str(data, "sourceName"),
            source_url=source_url,
            category=_require_str(data, "category"),
        )


# Returned when tip generation fails for any reason
FALLBACK_TIP = HealthTip(
    id="fallback-1",
    title="Stay Hydrated",
    content="Drinking water is essential for your health.",
    source_name="Mayo Clinic",
    source_url="https://www.mayoclinic.org",
    category="General",
)
