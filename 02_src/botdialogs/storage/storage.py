"""Key/value storage for persisted bot state."""

import json
from pathlib import Path
from typing import Any, Iterable, Protocol

import aiosqlite

from ..config import resolve_db_path
from ..logging_config import get_logger

logger = get_logger(__name__)

StoreItem = dict[str, Any]


class IStorage(Protocol):
    """Async key/value persistence of JSON-serializable records."""

    async def read(self, keys: Iterable[str]) -> dict[str, StoreItem]:
        """Read records by key. Missing keys are absent from the result."""
        ...

    async def write(self, changes: dict[str, StoreItem]) -> None:
        """Write records, replacing any existing record under the same key."""
        ...

    async def delete(self, keys: Iterable[str]) -> None:
        """Delete records by key. Unknown keys are ignored."""
        ...


class SqliteStorage:
    """SQLite storage implementation."""

    def __init__(self, db_path: str | Path | None = None):
        self._db_path = resolve_db_path(db_path)
        self._conn: aiosqlite.Connection | None = None

    async def init(self) -> None:
        """Open the database and create tables."""
        self._conn = await aiosqlite.connect(self._db_path)

        schema_path = Path(__file__).parent / "schema.sql"
        with open(schema_path, "r", encoding="utf-8") as f:
            schema_sql = f.read()
        await self._conn.executescript(schema_sql)
        await self._conn.commit()
        logger.info("SQLite storage opened at %s", self._db_path)

    async def close(self) -> None:
        """Close database connection."""
        if self._conn:
            await self._conn.close()
            self._conn = None

    async def read(self, keys: Iterable[str]) -> dict[str, StoreItem]:
        """Read records by key."""
        if not self._conn:
            raise RuntimeError("Storage not initialized")

        keys = list(keys)
        if not keys:
            return {}

        placeholders = ",".join("?" * len(keys))
        cursor = await self._conn.execute(
            f"SELECT key, data FROM state_items WHERE key IN ({placeholders})",
            keys,
        )
        rows = await cursor.fetchall()

        return {row[0]: json.loads(row[1]) for row in rows}

    async def write(self, changes: dict[str, StoreItem]) -> None:
        """Write records."""
        if not self._conn:
            raise RuntimeError("Storage not initialized")

        for key, item in changes.items():
            await self._conn.execute(
                """
                INSERT OR REPLACE INTO state_items (key, data, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                """,
                (key, json.dumps(item)),
            )
        await self._conn.commit()

    async def delete(self, keys: Iterable[str]) -> None:
        """Delete records by key."""
        if not self._conn:
            raise RuntimeError("Storage not initialized")

        for key in keys:
            await self._conn.execute("DELETE FROM state_items WHERE key = ?", (key,))
        await self._conn.commit()

    async def clear(self) -> None:
        """Clear all data."""
        if not self._conn:
            raise RuntimeError("Storage not initialized")

        await self._conn.execute("DELETE FROM state_items")
        await self._conn.commit()
