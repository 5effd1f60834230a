"""Store error hierarchy."""

from uuid import UUID


class StoreError(Exception):
    """Base class for all store failures."""


class StoreStateError(StoreError):
    """Store used outside its lifecycle (not loaded yet, or loaded twice)."""


class StoreLoadError(StoreError):
    """Bulk load from the persistence port failed at startup."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Failed to load {kind} store from persistence")
        self.kind = kind


class WriteThroughError(StoreError):
    """Persisting an entity failed; the in-memory store was left unchanged."""

    def __init__(self, kind: str, entity_id: UUID) -> None:
        super().__init__(f"Write-through failed for {kind} {entity_id}")
        self.kind = kind
        self.entity_id = entity_id


class DuplicateEntityError(StoreError):
    """An entity with the same id or lookup key is already stored."""

    def __init__(self, kind: str, key: object) -> None:
        super().__init__(f"{kind} already exists: {key}")
        self.kind = kind
        self.key = key


class EntityNotFoundError(StoreError):
    """Update targeted an entity the store does not hold."""

    def __init__(self, kind: str, entity_id: UUID) -> None:
        super().__init__(f"{kind} not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id
