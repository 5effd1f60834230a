"""Entity stores with write-through persistence."""

from chat_hub.store.activity import ActivityFeedStore
from chat_hub.store.base import EntityStore
from chat_hub.store.conversations import ConversationStore
from chat_hub.store.errors import (
    DuplicateEntityError,
    EntityNotFoundError,
    StoreError,
    StoreLoadError,
    StoreStateError,
    WriteThroughError,
)
from chat_hub.store.memory import InMemoryPersistence
from chat_hub.store.messages import MessageStore
from chat_hub.store.ports import PersistencePort
from chat_hub.store.registry import Stores, build_stores, in_memory_stores, sqlite_stores
from chat_hub.store.sqlite import SQLitePersistence
from chat_hub.store.users import UserStore

__all__ = [
    "ActivityFeedStore",
    "ConversationStore",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "EntityStore",
    "InMemoryPersistence",
    "MessageStore",
    "PersistencePort",
    "SQLitePersistence",
    "StoreError",
    "StoreLoadError",
    "StoreStateError",
    "Stores",
    "UserStore",
    "WriteThroughError",
    "build_stores",
    "in_memory_stores",
    "sqlite_stores",
]
