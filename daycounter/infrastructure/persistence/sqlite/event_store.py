"""SQLite implementation of the event store.

Local, file-backed persistence using aiosqlite. This is the default
backend: it keeps events on the user's machine across sessions.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

import aiosqlite

from daycounter.domain.countdown.core.entities.event import Event
from daycounter.domain.countdown.core.exceptions import (
    DuplicateKeyError,
    RecordNotFoundError,
    StoreUnavailableError,
    WriteFailedError,
)
from daycounter.domain.shared.ports.event_store import COLLECTION_NAME, SCHEMA_VERSION
from daycounter.infrastructure.persistence.mapping import event_to_record, record_to_event

logger = logging.getLogger(__name__)


class SQLiteEventStore:
    """
    SQLite implementation of IEventStore port.

    Schema (version 1, tracked with ``PRAGMA user_version``):

        CREATE TABLE events (
            id         TEXT PRIMARY KEY,
            name       TEXT NOT NULL,
            date       TEXT NOT NULL,      -- YYYY-MM-DD
            created_at TEXT NOT NULL       -- ISO 8601 with offset
        )
        idx_events_name (name), idx_events_date (date)  -- non-unique

    Each write runs in its own transaction and is committed before the
    coroutine returns; a failed write is rolled back.
    """

    def __init__(self, db_path: Union[str, Path] = "events.db") -> None:
        """
        Args:
            db_path: Path to SQLite database file (``:memory:`` for tests)
        """
        self.db_path = str(db_path)
        self.db: Optional[aiosqlite.Connection] = None

    async def initialize(self) -> None:
        """Open the database and create schema version 1 if needed."""
        if self.db is not None:
            return

        try:
            if self.db_path != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

            db = await aiosqlite.connect(self.db_path)
        except (OSError, aiosqlite.Error) as e:
            logger.error(
                "Failed to open SQLite event store",
                extra={"db_path": self.db_path, "error": str(e)},
            )
            raise StoreUnavailableError("Could not open the event database") from e

        try:
            db.row_factory = aiosqlite.Row
            await self._ensure_schema(db)
        except StoreUnavailableError:
            await db.close()
            raise
        except aiosqlite.Error as e:
            await db.close()
            logger.error(
                "Failed to initialize SQLite schema",
                extra={"db_path": self.db_path, "error": str(e)},
            )
            raise StoreUnavailableError("Could not open the event database") from e

        self.db = db
        logger.info("SQLite event store initialized", extra={"db_path": self.db_path})

    async def _ensure_schema(self, db: aiosqlite.Connection) -> None:
        async with db.execute("PRAGMA user_version") as cursor:
            row = await cursor.fetchone()
        version = row[0] if row else 0

        if version == SCHEMA_VERSION:
            return
        if version != 0:
            logger.error(
                "Unsupported event store schema",
                extra={"db_path": self.db_path, "schema_version": version},
            )
            raise StoreUnavailableError(f"Unsupported event store schema version {version}")

        await db.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {COLLECTION_NAME} (
                id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                date TEXT NOT NULL,
                created_at TEXT NOT NULL
            )
            """
        )
        await db.execute(
            f"CREATE INDEX IF NOT EXISTS idx_events_name ON {COLLECTION_NAME}(name)"
        )
        await db.execute(
            f"CREATE INDEX IF NOT EXISTS idx_events_date ON {COLLECTION_NAME}(date)"
        )
        # PRAGMA does not accept bound parameters
        await db.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
        await db.commit()
        logger.info(
            "Created event store schema",
            extra={"db_path": self.db_path, "schema_version": SCHEMA_VERSION},
        )

    def _require(self) -> aiosqlite.Connection:
        if self.db is None:
            raise StoreUnavailableError("Store not initialized")
        return self.db

    async def _write(self, sql: str, params: Tuple[Any, ...]) -> int:
        db = self._require()
        try:
            cursor = await db.execute(sql, params)
            await db.commit()
            return cursor.rowcount
        except aiosqlite.Error:
            await db.rollback()
            raise

    # ============================================================
    # Repository Operations (IEventStore interface)
    # ============================================================

    async def insert(self, event: Event) -> None:
        record = event_to_record(event)
        try:
            await self._write(
                f"INSERT INTO {COLLECTION_NAME} (id, name, date, created_at) "
                "VALUES (?, ?, ?, ?)",
                (record["id"], record["name"], record["date"], record["created_at"]),
            )
        except aiosqlite.IntegrityError as e:
            raise DuplicateKeyError(event.id) from e
        except aiosqlite.Error as e:
            logger.error(
                "Error in insert",
                extra={"event_id": event.id, "error": str(e)},
            )
            raise WriteFailedError("insert") from e

    async def update(self, event: Event) -> None:
        record = event_to_record(event)
        try:
            await self._write(
                f"INSERT INTO {COLLECTION_NAME} (id, name, date, created_at) "
                "VALUES (?, ?, ?, ?) "
                "ON CONFLICT(id) DO UPDATE SET "
                "name = excluded.name, date = excluded.date, created_at = excluded.created_at",
                (record["id"], record["name"], record["date"], record["created_at"]),
            )
        except aiosqlite.Error as e:
            logger.error(
                "Error in update",
                extra={"event_id": event.id, "error": str(e)},
            )
            raise WriteFailedError("update") from e

    async def remove(self, event_id: str) -> None:
        try:
            await self._write(
                f"DELETE FROM {COLLECTION_NAME} WHERE id = ?",
                (event_id,),
            )
        except aiosqlite.Error as e:
            logger.error(
                "Error in remove",
                extra={"event_id": event_id, "error": str(e)},
            )
            raise WriteFailedError("remove") from e

    async def get(self, event_id: str) -> Event:
        rows = await self._select(
            "get", f"SELECT * FROM {COLLECTION_NAME} WHERE id = ?", (event_id,)
        )
        if not rows:
            raise RecordNotFoundError(event_id)
        return rows[0]

    async def load_all(self) -> List[Event]:
        return await self._select("load_all", f"SELECT * FROM {COLLECTION_NAME}", ())

    async def find_by_name(self, name: str) -> List[Event]:
        return await self._select(
            "find_by_name", f"SELECT * FROM {COLLECTION_NAME} WHERE name = ?", (name,)
        )

    async def find_by_date(self, date: str) -> List[Event]:
        return await self._select(
            "find_by_date", f"SELECT * FROM {COLLECTION_NAME} WHERE date = ?", (date,)
        )

    async def _select(self, operation: str, sql: str, params: Tuple[Any, ...]) -> List[Event]:
        db = self._require()
        try:
            async with db.execute(sql, params) as cursor:
                rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            logger.error(
                f"Error in {operation}",
                extra={"db_path": self.db_path, "error": str(e)},
            )
            raise WriteFailedError(operation) from e

        events: List[Event] = []
        for row in rows:
            try:
                events.append(record_to_event(dict(row)))
            except ValueError as e:
                logger.warning(
                    "Skipping corrupt stored event",
                    extra={"event_id": row["id"], "error": str(e)},
                )
        return events

    async def close(self) -> None:
        """Close SQLite connection."""
        if self.db is not None:
            await self.db.close()
            self.db = None
            logger.info("SQLite event store closed", extra={"db_path": self.db_path})
