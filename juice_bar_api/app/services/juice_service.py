"""
Business logic for juices.

Lookups, filters and search are linear scans over the store and
preserve insertion order.  Every method returns copies of stored
records; callers cannot change the store by mutating a result.
"""

import logging
from typing import List, Optional

from ..core.events import EventBroker, JUICE_ADDED
from ..core.exceptions import NotFoundError
from ..core.store import RecordStore
from ..schemas.juice import JuiceCreate, JuiceRead, JuiceUpdate

logger = logging.getLogger(__name__)

JUICE_NOT_FOUND = "Juice not found"


class JuiceService:
    """CRUD, category filter and text search over the juice catalog."""

    def __init__(self, store: RecordStore, broker: Optional[EventBroker] = None) -> None:
        self._store = store
        self._broker = broker

    async def list_juices(self) -> List[JuiceRead]:
        return await self.find_juices()

    async def find_juices(
        self,
        category: Optional[str] = None,
        query: Optional[str] = None,
    ) -> List[JuiceRead]:
        """Return juices matching every given criterion.

        - ``category`` is an exact, case‑sensitive match.
        - ``query`` is a case‑insensitive substring of the name,
          description or category.  An empty query matches everything.
        """
        needle = query.lower() if query is not None else None
        with self._store.lock:
            return [
                juice.model_copy()
                for juice in self._store.juices
                if (category is None or juice.category == category)
                and (needle is None or self._matches(juice, needle))
            ]

    async def juices_by_category(self, category: str) -> List[JuiceRead]:
        return await self.find_juices(category=category)

    async def search_juices(self, query: str) -> List[JuiceRead]:
        return await self.find_juices(query=query)

    async def get_juice(self, juice_id: str) -> JuiceRead:
        with self._store.lock:
            index = self._index_of(juice_id)
            return self._store.juices[index].model_copy()

    async def create_juice(self, data: JuiceCreate) -> JuiceRead:
        with self._store.lock:
            juice = JuiceRead(id=self._store.next_juice_id(), **data.model_dump())
            self._store.juices.append(juice)
        logger.info("Created juice %s (%s)", juice.id, juice.name)
        if self._broker is not None:
            self._broker.publish(JUICE_ADDED, juice.model_copy())
        return juice.model_copy()

    async def update_juice(self, juice_id: str, data: JuiceUpdate) -> JuiceRead:
        """Apply the fields present in ``data``; absent fields are kept."""
        changes = data.changes()
        with self._store.lock:
            index = self._index_of(juice_id)
            updated = self._store.juices[index].model_copy(update=changes)
            self._store.juices[index] = updated
        logger.info("Updated juice %s: %s", juice_id, sorted(changes))
        return updated.model_copy()

    async def delete_juice(self, juice_id: str) -> bool:
        with self._store.lock:
            index = self._index_of(juice_id)
            del self._store.juices[index]
        logger.info("Deleted juice %s", juice_id)
        return True

    def _index_of(self, juice_id: str) -> int:
        """Position of ``juice_id`` in the store.  Caller holds the lock."""
        for index, juice in enumerate(self._store.juices):
            if juice.id == juice_id:
                return index
        logger.warning("Juice %s not found", juice_id)
        raise NotFoundError(JUICE_NOT_FOUND)

    @staticmethod
    def _matches(juice: JuiceRead, needle: str) -> bool:
        return any(needle in field.lower() for field in (juice.name, juice.description, juice.category))
