"""Data access layer for daily-sage.

Two interchangeable backends implement the same contract: reads return
None when nothing is stored, profile saves merge into the stored document,
routine sets and journal entries are replaced whole. Driver errors are not
caught here.
"""

import json
import logging
from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path

import aiosqlite
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..config import BackendKind, Settings
from ..models.journal import JournalEntry
from ..models.routine import RoutineItem
from ..models.user_profile import Identity, UserProfile
from .engine import connect_mongo, init_db

logger = logging.getLogger(__name__)


class DataStore(ABC):
    """Persistence contract shared by the local and remote backends."""

    kind: BackendKind

    @abstractmethod
    async def get_profile(self, uid: str) -> UserProfile | None:
        """Get a user's profile."""

    @abstractmethod
    async def save_profile(self, profile: UserProfile, clear_unset: bool = False) -> None:
        """Merge a profile into the stored document.

        With ``clear_unset`` the unset questionnaire answers are removed
        from the stored document rather than kept.
        """

    @abstractmethod
    async def get_routines(self, uid: str) -> list[RoutineItem] | None:
        """Get a user's cached routine set."""

    @abstractmethod
    async def save_routines(self, uid: str, items: list[RoutineItem]) -> None:
        """Replace a user's routine set."""

    @abstractmethod
    async def clear_routines(self, uid: str) -> None:
        """Drop a user's cached routine set so it is generated again."""

    @abstractmethod
    async def get_journal_entry(self, uid: str, day: date) -> JournalEntry | None:
        """Get the journal entry for one calendar day."""

    @abstractmethod
    async def save_journal_entry(self, uid: str, entry: JournalEntry) -> None:
        """Replace the journal entry for the entry's day."""

    @abstractmethod
    async def list_journal_entries(self, uid: str, limit: int = 30) -> list[JournalEntry]:
        """List a user's journal entries, newest first."""

    @abstractmethod
    async def get_identity(self) -> Identity | None:
        """Get the signed-in identity for this client."""

    @abstractmethod
    async def set_identity(self, identity: Identity) -> None:
        """Record the signed-in identity for this client."""

    @abstractmethod
    async def clear_identity(self) -> None:
        """Forget the signed-in identity."""


class LocalStore(DataStore):
    """Mock-mode store: a key/value table in a local SQLite file."""

    kind = BackendKind.LOCAL
    IDENTITY_KEY = "mock_user"

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self._initialized = False

    @staticmethod
    def profile_key(uid: str) -> str:
        return f"profile_{uid}"

    @staticmethod
    def routines_key(uid: str) -> str:
        return f"routines_{uid}"

    @staticmethod
    def journal_key(uid: str, day: date) -> str:
        return f"journal_{uid}_{day.isoformat()}"

    async def _ensure_schema(self) -> None:
        if not self._initialized:
            await init_db(self.db_path)
            self._initialized = True

    async def _get(self, key: str):
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT value FROM kv WHERE key = ?", (key,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return json.loads(row[0])

    async def _put(self, key: str, value) -> None:
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO kv (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, json.dumps(value)),
            )
            await db.commit()

    async def _delete(self, key: str) -> None:
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM kv WHERE key = ?", (key,))
            await db.commit()

    async def get_profile(self, uid: str) -> UserProfile | None:
        data = await self._get(self.profile_key(uid))
        return UserProfile.from_dict(data) if data else None

    async def save_profile(self, profile: UserProfile, clear_unset: bool = False) -> None:
        key = self.profile_key(profile.uid)
        data = await self._get(key) or {}
        data.update(profile.to_dict(include_unset=clear_unset))
        await self._put(key, {k: v for k, v in data.items() if v is not None})

    async def get_routines(self, uid: str) -> list[RoutineItem] | None:
        data = await self._get(self.routines_key(uid))
        if data is None:
            return None
        return [RoutineItem.from_dict(item) for item in data]

    async def save_routines(self, uid: str, items: list[RoutineItem]) -> None:
        await self._put(self.routines_key(uid), [item.to_dict() for item in items])

    async def clear_routines(self, uid: str) -> None:
        await self._delete(self.routines_key(uid))

    async def get_journal_entry(self, uid: str, day: date) -> JournalEntry | None:
        data = await self._get(self.journal_key(uid, day))
        return JournalEntry.from_dict(data) if data else None

    async def save_journal_entry(self, uid: str, entry: JournalEntry) -> None:
        await self._put(self.journal_key(uid, entry.date), entry.to_dict())

    async def list_journal_entries(self, uid: str, limit: int = 30) -> list[JournalEntry]:
        prefix = f"journal_{uid}_"
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT key, value FROM kv WHERE substr(key, 1, ?) = ? ORDER BY key DESC",
                (len(prefix), prefix),
            )
            rows = await cursor.fetchall()

        entries = []
        for key, value in rows:
            # Skip keys of other users whose uid starts with this one
            suffix = key[len(prefix):]
            if len(suffix) != 10:
                continue
            entries.append(JournalEntry.from_dict(json.loads(value)))
            if len(entries) >= limit:
                break
        return entries

    async def get_identity(self) -> Identity | None:
        data = await self._get(self.IDENTITY_KEY)
        return Identity.from_dict(data) if data else None

    async def set_identity(self, identity: Identity) -> None:
        await self._put(self.IDENTITY_KEY, identity.to_dict())

    async def clear_identity(self) -> None:
        await self._delete(self.IDENTITY_KEY)


class MongoStore(DataStore):
    """Remote store backed by a MongoDB database.

    Profiles live in ``users`` and routine sets in ``routines``, both keyed
    by uid. Journal entries live in ``users.journal`` keyed by uid and date.
    The signed-in identity is kept in ``sessions`` under the session id.
    """

    kind = BackendKind.REMOTE

    def __init__(self, db: AsyncIOMotorDatabase, session_id: str = "default"):
        self.db = db
        self.session_id = session_id

    @property
    def users(self):
        return self.db["users"]

    @property
    def routines(self):
        return self.db["routines"]

    @property
    def journal(self):
        return self.db["users.journal"]

    @property
    def sessions(self):
        return self.db["sessions"]

    @staticmethod
    def _strip_id(document: dict) -> dict:
        document.pop("_id", None)
        return document

    async def get_profile(self, uid: str) -> UserProfile | None:
        document = await self.users.find_one({"_id": uid})
        if document is None:
            return None
        return UserProfile.from_dict(self._strip_id(document))

    async def save_profile(self, profile: UserProfile, clear_unset: bool = False) -> None:
        document = profile.to_dict(include_unset=clear_unset)
        update = {"$set": {k: v for k, v in document.items() if v is not None}}
        cleared = {k: "" for k, v in document.items() if v is None}
        if cleared:
            update["$unset"] = cleared
        await self.users.update_one({"_id": profile.uid}, update, upsert=True)

    async def get_routines(self, uid: str) -> list[RoutineItem] | None:
        document = await self.routines.find_one({"_id": uid})
        if document is None:
            return None
        return [RoutineItem.from_dict(item) for item in document.get("items", [])]

    async def save_routines(self, uid: str, items: list[RoutineItem]) -> None:
        await self.routines.replace_one(
            {"_id": uid},
            {"items": [item.to_dict() for item in items]},
            upsert=True,
        )

    async def clear_routines(self, uid: str) -> None:
        await self.routines.delete_one({"_id": uid})

    async def get_journal_entry(self, uid: str, day: date) -> JournalEntry | None:
        document = await self.journal.find_one({"_id": {"uid": uid, "date": day.isoformat()}})
        if document is None:
            return None
        return JournalEntry.from_dict(self._strip_id(document))

    async def save_journal_entry(self, uid: str, entry: JournalEntry) -> None:
        await self.journal.replace_one(
            {"_id": {"uid": uid, "date": entry.date.isoformat()}},
            {**entry.to_dict(), "uid": uid},
            upsert=True,
        )

    async def list_journal_entries(self, uid: str, limit: int = 30) -> list[JournalEntry]:
        cursor = self.journal.find({"uid": uid}).sort("date", -1).limit(limit)
        return [JournalEntry.from_dict(self._strip_id(document)) async for document in cursor]

    async def get_identity(self) -> Identity | None:
        document = await self.sessions.find_one({"_id": self.session_id})
        if document is None:
            return None
        return Identity.from_dict(self._strip_id(document))

    async def set_identity(self, identity: Identity) -> None:
        await self.sessions.replace_one(
            {"_id": self.session_id},
            identity.to_dict(),
            upsert=True,
        )

    async def clear_identity(self) -> None:
        await self.sessions.delete_one({"_id": self.session_id})


def create_store(settings: Settings) -> DataStore:
    """Build the store for the backend selected by settings."""
    if settings.backend == BackendKind.REMOTE:
        logger.info("Using remote document database %s", settings.mongo_db)
        return MongoStore(connect_mongo(settings), session_id=settings.session_id)

    logger.warning("No database URI configured. Using local mock mode at %s", settings.db_path)
    return LocalStore(settings.db_path)
