"""In-memory persistence adapter.

Satisfies PersistencePort without any backing storage. Used for the
``memory`` backend in development and as the default port in tests.
"""

import threading
from typing import Generic
from uuid import UUID

from chat_hub.store.ports import E


class InMemoryPersistence(Generic[E]):
    """Ordered id -> entity mapping that outlives any single store instance."""

    def __init__(self, entities: list[E] | None = None) -> None:
        self._lock = threading.Lock()
        self._entities: dict[UUID, E] = {e.id: e for e in entities or []}

    def load_all(self) -> list[E]:
        with self._lock:
            return list(self._entities.values())

    def write_through(self, entity: E) -> None:
        with self._lock:
            self._entities[entity.id] = entity
