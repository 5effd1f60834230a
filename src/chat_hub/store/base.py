"""Generic in-memory entity store with synchronous write-through.

Lifecycle: constructed empty, populated once by ``load()`` at process start,
then mutated only through ``add`` (and ``_replace`` for stores that allow
updates). Every mutation is persisted before the in-memory mapping changes,
so a failed write leaves memory exactly as it was. One lock per store
serializes writers and makes persisted order equal insertion order.
"""

import logging
import threading
from typing import Callable, Generic
from uuid import UUID

from chat_hub.store.errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    StoreLoadError,
    StoreStateError,
    WriteThroughError,
)
from chat_hub.store.ports import E, PersistencePort

logger = logging.getLogger(__name__)


class EntityStore(Generic[E]):
    """In-memory mapping of id -> entity, kept in insertion order."""

    kind = "entity"

    def __init__(self, persistence: PersistencePort[E]) -> None:
        self._persistence = persistence
        self._entities: dict[UUID, E] = {}
        self._index: dict[str, UUID] = {}
        self._lock = threading.RLock()
        self._loaded = False

    def _key(self, entity: E) -> str | None:
        """Secondary lookup key for ``get_by_key``. None when the store has none."""
        return None

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        """Populate the store from the persistence port. Call exactly once."""
        with self._lock:
            if self._loaded:
                raise StoreStateError(f"{self.kind} store is already loaded")
            try:
                entities = list(self._persistence.load_all())
            except Exception as exc:
                logger.error("Loading %s store failed: %s", self.kind, exc, exc_info=True)
                raise StoreLoadError(self.kind) from exc

            for entity in entities:
                self._entities[entity.id] = entity
                key = self._key(entity)
                if key is not None:
                    self._index[key] = entity.id
            self._loaded = True

        logger.info("Loaded %d %s(s)", len(entities), self.kind)

    def add(self, entity: E) -> None:
        """Persist ``entity`` and append it. Raises WriteThroughError on port failure."""
        with self._lock:
            self._require_loaded()
            if entity.id in self._entities:
                raise DuplicateEntityError(self.kind, entity.id)
            key = self._key(entity)
            if key is not None and key in self._index:
                raise DuplicateEntityError(self.kind, key)

            self._write_through(entity)

            self._entities[entity.id] = entity
            if key is not None:
                self._index[key] = entity.id

    def _replace(self, entity: E) -> None:
        """Persist and swap in a new version of a stored entity, keeping its position."""
        with self._lock:
            self._require_loaded()
            current = self._entities.get(entity.id)
            if current is None:
                raise EntityNotFoundError(self.kind, entity.id)
            old_key = self._key(current)
            new_key = self._key(entity)
            if new_key is not None and new_key != old_key and new_key in self._index:
                raise DuplicateEntityError(self.kind, new_key)

            self._write_through(entity)

            self._entities[entity.id] = entity
            if old_key is not None and old_key != new_key:
                del self._index[old_key]
            if new_key is not None:
                self._index[new_key] = entity.id

    def _write_through(self, entity: E) -> None:
        try:
            self._persistence.write_through(entity)
        except Exception as exc:
            logger.error(
                "Write-through failed for %s %s: %s", self.kind, entity.id, exc, exc_info=True
            )
            raise WriteThroughError(self.kind, entity.id) from exc

    def get_all(self) -> list[E]:
        """Snapshot of all entities in insertion order."""
        with self._lock:
            self._require_loaded()
            return list(self._entities.values())

    def get_by_id(self, entity_id: UUID) -> E | None:
        with self._lock:
            self._require_loaded()
            return self._entities.get(entity_id)

    def get_by_key(self, key: str) -> E | None:
        with self._lock:
            self._require_loaded()
            entity_id = self._index.get(key)
            return self._entities.get(entity_id) if entity_id is not None else None

    def filter(self, predicate: Callable[[E], bool]) -> list[E]:
        """Entities matching ``predicate``, in insertion order."""
        with self._lock:
            self._require_loaded()
            return [e for e in self._entities.values() if predicate(e)]

    def __len__(self) -> int:
        with self._lock:
            self._require_loaded()
            return len(self._entities)

    def _require_loaded(self) -> None:
        if not self._loaded:
            raise StoreStateError(f"{self.kind} store used before load()")
