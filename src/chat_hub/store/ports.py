"""Persistence port used by the entity stores.

Stores depend only on this contract, so any backend that can list its
entities in insertion order and persist a single entity can back them.
"""

from typing import Protocol, TypeVar

from pydantic import BaseModel

E = TypeVar("E", bound=BaseModel)


class PersistencePort(Protocol[E]):
    """Storage operations required by an entity store."""

    def load_all(self) -> list[E]:
        """Return every persisted entity, oldest first."""
        ...

    def write_through(self, entity: E) -> None:
        """Persist ``entity`` (insert or replace by id). Raises on failure."""
        ...
