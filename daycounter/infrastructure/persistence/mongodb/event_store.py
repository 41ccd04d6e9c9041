"""MongoDB implementation of the event store (motor)."""

from __future__ import annotations

from typing import Any, Dict, List
import logging

from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError
from pymongo.errors import PyMongoError

from daycounter.domain.countdown.core.entities.event import Event
from daycounter.domain.countdown.core.exceptions import (
    DuplicateKeyError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from daycounter.domain.shared.ports.event_store import COLLECTION_NAME, SCHEMA_VERSION
from daycounter.infrastructure.persistence.mapping import event_to_record, record_to_event
from daycounter.infrastructure.persistence.mongodb.base import MongoBaseRepository

logger = logging.getLogger(__name__)

SCHEMA_COLLECTION = "schema_versions"


class MongoEventStore(MongoBaseRepository[Event]):
    """
    MongoDB implementation of IEventStore port.

    Document Schema:
    {
        "_id": "9f0c...e1",                      # Event ID
        "name": "Vacaciones",
        "date": "2026-12-20",
        "created_at": "2026-10-19T09:30:00+02:00"
    }

    Indexes:
    - _id: Unique index (automatic)
    - idx_name (name), idx_date (date): non-unique

    Schema version is kept in ``schema_versions`` as
    ``{"_id": "events", "version": 1}``.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._initialized = False

    @property
    def collection_name(self) -> str:
        return COLLECTION_NAME

    # ============================================================
    # Document Mapping (Domain ↔ MongoDB)
    # ============================================================

    def to_document(self, entity: Event) -> Dict[str, Any]:
        record = event_to_record(entity)
        record["_id"] = record.pop("id")
        return record

    def from_document(self, doc: Dict[str, Any]) -> Event:
        record = dict(doc)
        if "_id" in record:
            record["id"] = record.pop("_id")
        return record_to_event(record)

    # ============================================================
    # Store Operations (IEventStore interface)
    # ============================================================

    async def initialize(self) -> None:
        """
        Verify connectivity, then create indexes and the schema marker.

        Raises:
            StoreUnavailableError: If MongoDB is unreachable or the stored
                schema version is not supported
        """
        if self._initialized:
            return

        await self._ping()

        schema = self._db[SCHEMA_COLLECTION]
        try:
            marker = await schema.find_one({"_id": COLLECTION_NAME})
            version = marker.get("version") if marker else None

            if version is not None and version != SCHEMA_VERSION:
                logger.error(
                    "Unsupported event store schema",
                    extra={"schema_version": version},
                )
                raise StoreUnavailableError(
                    f"Unsupported event store schema version {version}"
                )

            await self.collection.create_index([("name", 1)], name="idx_name")
            await self.collection.create_index([("date", 1)], name="idx_date")

            if version is None:
                await schema.replace_one(
                    {"_id": COLLECTION_NAME},
                    {"_id": COLLECTION_NAME, "version": SCHEMA_VERSION},
                    upsert=True,
                )
                logger.info(
                    "Created event store schema",
                    extra={"schema_version": SCHEMA_VERSION},
                )
        except PyMongoError as e:
            logger.error(f"Failed to initialize MongoDB schema: error={e}")
            raise StoreUnavailableError("Could not open the event database") from e

        self._initialized = True

    def _require(self) -> None:
        if not self._initialized:
            raise StoreUnavailableError("Store not initialized")

    async def insert(self, event: Event) -> None:
        self._require()
        try:
            async with self._guard("insert", event_id=event.id):
                await self.collection.insert_one(self.to_document(event))
        except MongoDuplicateKeyError as e:
            raise DuplicateKeyError(event.id) from e

    async def update(self, event: Event) -> None:
        self._require()
        async with self._guard("update", event_id=event.id):
            await self.collection.replace_one(
                {"_id": event.id}, self.to_document(event), upsert=True
            )

    async def remove(self, event_id: str) -> None:
        self._require()
        async with self._guard("remove", event_id=event_id):
            await self.collection.delete_one({"_id": event_id})

    async def get(self, event_id: str) -> Event:
        self._require()
        async with self._guard("get", event_id=event_id):
            doc = await self.collection.find_one({"_id": event_id})
        if doc is None:
            raise RecordNotFoundError(event_id)
        return self.from_document(doc)

    async def load_all(self) -> List[Event]:
        return await self._query("load_all", {})

    async def find_by_name(self, name: str) -> List[Event]:
        return await self._query("find_by_name", {"name": name})

    async def find_by_date(self, date: str) -> List[Event]:
        return await self._query("find_by_date", {"date": date})

    async def _query(self, operation: str, query: Dict[str, Any]) -> List[Event]:
        self._require()
        async with self._guard(operation, query=query):
            docs = await self.collection.find(query).to_list(length=None)
        return self._to_events(docs)

    def _to_events(self, docs: List[Dict[str, Any]]) -> List[Event]:
        events: List[Event] = []
        for doc in docs:
            try:
                events.append(self.from_document(doc))
            except ValueError as e:
                logger.warning(
                    "Skipping corrupt stored event",
                    extra={"event_id": doc.get("_id"), "error": str(e)},
                )
        return events

    async def close(self) -> None:
        await super().close()
        self._initialized = False
