"""Dashboard orchestration: routines, tips and today's journal entry."""

import logging
from datetime import date
from typing import Callable

from ..db.stores import DataStore
from ..exceptions import InvalidTransitionError, NotFoundError
from ..generation.client import ContentGenerator
from ..models.journal import MOOD_VALUES, JournalEntry
from ..models.routine import HealthTip, RoutineItem
from ..models.user_profile import UserProfile

logger = logging.getLogger(__name__)

SAVE_MESSAGE = "Journal saved successfully!"


class DashboardSession:
    """State of one user's dashboard between activations.

    ``activate`` loads (or generates once) the routine set, loads today's
    journal entry or starts a fresh one, then requests new tips. Steps run
    in that order. Failures are logged and leave the session as it was.
    The entry date is fixed at activation; there is no rollover at midnight.
    Writes are refused until today's entry has been read.
    """

    def __init__(
        self,
        store: DataStore,
        generator: ContentGenerator,
        profile: UserProfile,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.generator = generator
        self.profile = profile
        self._today = today

        self.routines: list[RoutineItem] = []
        self.tips: list[HealthTip] = []
        self.entry = JournalEntry(date=today())
        self.loading = False
        self.entry_loaded = False
        self.last_error: Exception | None = None

    @property
    def uid(self) -> str:
        return self.profile.uid

    async def activate(self) -> None:
        """Load everything the dashboard shows."""
        self.loading = True
        self.last_error = None
        try:
            routines = await self.store.get_routines(self.uid)
            if not routines:
                routines = await self.generator.generate_routines(self.profile)
                await self.store.save_routines(self.uid, routines)
            self.routines = routines

            today = self._today()
            entry = await self.store.get_journal_entry(self.uid, today)
            self.entry = entry if entry is not None else JournalEntry(date=today)
            self.entry_loaded = True

            self.tips = await self.generator.generate_daily_tips(self.profile)
        except Exception as e:
            logger.exception("Dashboard load failed for %s", self.uid)
            self.last_error = e
        finally:
            self.loading = False

    def require_loaded_entry(self) -> None:
        # Saving over an entry that was never read would lose it
        if not self.entry_loaded:
            raise InvalidTransitionError("Today's journal entry has not been loaded", state="not_loaded")

    async def toggle_routine(self, routine_id: str) -> JournalEntry:
        """Flip a routine item's completion and save the entry immediately."""
        self.require_loaded_entry()
        if routine_id not in {item.id for item in self.routines}:
            raise NotFoundError("Routine item", routine_id)

        completed = set(self.entry.completed_routine_ids)
        if routine_id in completed:
            completed.discard(routine_id)
        else:
            completed.add(routine_id)
        self.entry.completed_routine_ids = completed

        await self.store.save_journal_entry(self.uid, self.entry)
        return self.entry

    def adjust_water(self, delta: int) -> int:
        """Add or remove cups of water, never dropping below zero."""
        self.entry.water_intake_cups = max(0, self.entry.water_intake_cups + delta)
        return self.entry.water_intake_cups

    def set_mood(self, mood: int) -> None:
        if isinstance(mood, bool) or mood not in MOOD_VALUES:
            raise ValueError(f"Mood must be one of {MOOD_VALUES}, got {mood}")
        self.entry.mood = mood

    def set_sleep_hours(self, hours: float) -> None:
        self.entry.sleep_hours = hours

    def set_notes(self, notes: str) -> None:
        self.entry.notes = notes

    async def save_entry(self) -> str:
        """Persist the whole current entry."""
        self.require_loaded_entry()
        await self.store.save_journal_entry(self.uid, self.entry)
        logger.info("Saved journal entry %s for %s", self.entry.date, self.uid)
        return SAVE_MESSAGE

    @property
    def completion_ratio(self) -> float:
        """Share of today's routine items marked done."""
        if not self.routines:
            return 0.0
        ids = {item.id for item in self.routines}
        return len(ids & self.entry.completed_routine_ids) / len(ids)

    def to_dict(self) -> dict:
        return {
            "loading": self.loading,
            "routines": [item.to_dict() for item in self.routines],
            "tips": [tip.to_dict() for tip in self.tips],
            "journal": self.entry.to_dict(),
            "completion": round(self.completion_ratio, 2),
        }
