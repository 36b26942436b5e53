import logging
from typing import Generic, Optional, TypeVar

from progress_tracker.db import JsonStorage
from progress_tracker.schemas.common import RecordModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=RecordModel)


class EntityStore(Generic[T]):
    """In-memory, insertion-ordered collection of records keyed by id.

    Every mutation rewrites the collection's file before returning. No
    validation happens here; callers build valid records.
    """

    def __init__(self, collection: str, storage: JsonStorage, items: Optional[list[T]] = None):
        self.collection = collection
        self.storage = storage
        self._items: list[T] = list(items) if items is not None else storage.load(collection)

    def all(self) -> list[T]:
        # Copy so callers hold a snapshot, not the live list
        return list(self._items)

    def get(self, item_id: str) -> Optional[T]:
        return next((item for item in self._items if item.id == item_id), None)

    def add(self, item: T) -> None:
        self._items.append(item)
        self._persist()

    def replace(self, item_id: str, new_item: T) -> None:
        # Absent ids leave the list unchanged, but the file is still rewritten
        self._items = [new_item if item.id == item_id else item for item in self._items]
        self._persist()

    def remove(self, item_id: str) -> None:
        self._items = [item for item in self._items if item.id != item_id]
        self._persist()

    def clear(self) -> None:
        self._items = []
        self._persist()

    def reload(self) -> None:
        self._items = self.storage.load(self.collection)

    def __len__(self) -> int:
        return len(self._items)

    def _persist(self) -> None:
        logger.debug("Persisting %s (%d records)", self.collection, len(self._items))
        self.storage.save(self.collection, self._items)
