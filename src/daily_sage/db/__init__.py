"""Database layer for daily-sage."""

from .engine import connect_mongo, init_db
from .stores import DataStore, LocalStore, MongoStore, create_store

__all__ = [
    "connect_mongo",
    "create_store",
    "DataStore",
    "init_db",
    "LocalStore",
    "MongoStore",
]
