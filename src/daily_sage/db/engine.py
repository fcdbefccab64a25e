"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..config import Settings


async def init_db(db_path: Path) -> None:
    """Initialize the local key/value schema."""
    db_path.parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS kv (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        await db.commit()


def connect_mongo(settings: Settings) -> AsyncIOMotorDatabase:
    """Open the remote document database named in settings."""
    client = AsyncIOMotorClient(settings.mongo_uri)
    return client[settings.mongo_db]
