"""Storage module."""

from .memory import MemoryStorage
from .storage import IStorage, SqliteStorage, StoreItem

__all__ = ["IStorage", "MemoryStorage", "SqliteStorage", "StoreItem"]
