"""Shared plumbing for motor-backed stores.

Owns the client, the database/collection handles and the translation of
driver errors into domain persistence errors. Subclasses supply the
collection name and the document mapping.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Generic, Optional, TypeVar
import logging

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import DuplicateKeyError as MongoDuplicateKeyError
from pymongo.errors import PyMongoError

from daycounter.domain.countdown.core.exceptions import (
    StoreUnavailableError,
    WriteFailedError,
)
from daycounter.infrastructure.config import get_mongodb_database, get_mongodb_uri

TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Base for stores that keep one entity type in one MongoDB collection.

    Usage in a subclass:
        >>> async with self._guard("remove", event_id=event_id):
        ...     await self.collection.delete_one({"_id": event_id})

    Any ``PyMongoError`` raised inside ``_guard`` is logged with the
    collection, the operation and the given context, and re-raised as
    WriteFailedError. Duplicate keys pass through untouched so the
    subclass can map them to its own error.
    """

    def __init__(
        self,
        client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None,
        database_name: Optional[str] = None,
    ):
        """
        Args:
            client: Existing motor client; built from MONGODB_URI when omitted
            database_name: Defaults to MONGODB_DATABASE

        Raises:
            ValueError: If no client is given and MONGODB_URI is unset
        """
        if client is None:
            uri = get_mongodb_uri()
            if not uri:
                raise ValueError(
                    "MONGODB_URI is not set; configure it (with MONGODB_USER and "
                    "MONGODB_PASSWORD if the URI uses placeholders) or pass a client"
                )
            client = AsyncIOMotorClient(uri)

        self._client: AsyncIOMotorClient[Dict[str, Any]] = client
        self._db: AsyncIOMotorDatabase[Dict[str, Any]] = client[
            database_name or get_mongodb_database()
        ]
        self._collection = self._db[self.collection_name]

        logger.debug(
            "Mongo store created",
            extra={"store": type(self).__name__, "collection": self.collection_name},
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the collection holding the entities."""

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Entity → document (``_id`` set from the entity key)."""

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Document → entity.

        Raises:
            ValueError: If the document is malformed
        """

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        return self._collection

    async def _ping(self) -> None:
        """
        Raises:
            StoreUnavailableError: If the server cannot be reached
        """
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.error(
                "MongoDB unreachable",
                extra={"collection": self.collection_name, "error": str(e)},
            )
            raise StoreUnavailableError("Could not reach the event database") from e

    @asynccontextmanager
    async def _guard(self, operation: str, **context: Any) -> AsyncIterator[None]:
        try:
            yield
        except MongoDuplicateKeyError:
            raise
        except PyMongoError as e:
            logger.error(
                f"MongoDB {operation} failed",
                extra={
                    "collection": self.collection_name,
                    "operation": operation,
                    "error": str(e),
                    **context,
                },
            )
            raise WriteFailedError(operation) from e

    async def close(self) -> None:
        self._client.close()
        logger.info("Mongo store closed", extra={"store": type(self).__name__})
