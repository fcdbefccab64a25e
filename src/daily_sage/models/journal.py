"""Daily journal entry model."""

from dataclasses import dataclass, field
from datetime import date

MOOD_VALUES = (1, 2, 3, 4, 5)
MAX_SLEEP_HOURS = 12


@dataclass
class JournalEntry:
    """The single daily record of one user's wellness metrics.

    The entry date is the natural key; one entry exists per user per
    calendar day. New days start from the defaults below.
    """

    date: date
    completed_routine_ids: set[str] = field(default_factory=set)
    mood: int = 3  # 1-5
    notes: str = ""
    water_intake_cups: int = 0
    sleep_hours: float = 7

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "date": self.date.isoformat(),
            "completedRoutineIds": sorted(self.completed_routine_ids),
            "mood": self.mood,
            "notes": self.notes,
            "waterIntakeCups": self.water_intake_cups,
            "sleepHours": self.sleep_hours,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JournalEntry":
        """Create from dictionary."""
        return cls(
            date=date.fromisoformat(data["date"]),
            completed_routine_ids=set(data.get("completedRoutineIds", [])),
            mood=data.get("mood", 3),
            notes=data.get("notes", ""),
            water_intake_cups=data.get("waterIntakeCups", 0),
            sleep_hours=data.get("sleepHours", 7),
        )
