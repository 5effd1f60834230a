"""Process-wide store container.

Built once at startup from settings, loaded eagerly, then passed to the
service layer and the HTTP router instead of being looked up globally.
"""

import logging
from dataclasses import dataclass

from chat_hub.config import Settings
from chat_hub.models.activity import ActivityEvent
from chat_hub.models.chat import Conversation, Message, User
from chat_hub.store.activity import ActivityFeedStore
from chat_hub.store.conversations import ConversationStore
from chat_hub.store.memory import InMemoryPersistence
from chat_hub.store.messages import MessageStore
from chat_hub.store.sqlite import SQLitePersistence
from chat_hub.store.users import UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stores:
    """The four entity stores of one process."""

    users: UserStore
    conversations: ConversationStore
    messages: MessageStore
    activity: ActivityFeedStore

    def load_all(self) -> None:
        """Load every store. Any failure aborts startup."""
        for store in (self.users, self.conversations, self.messages, self.activity):
            store.load()


def in_memory_stores() -> Stores:
    """Stores backed by fresh in-memory ports (not loaded)."""
    return Stores(
        users=UserStore(InMemoryPersistence()),
        conversations=ConversationStore(InMemoryPersistence()),
        messages=MessageStore(InMemoryPersistence()),
        activity=ActivityFeedStore(InMemoryPersistence()),
    )


def sqlite_stores(db_path: str) -> Stores:
    """Stores backed by one SQLite database, one table per entity kind (not loaded)."""
    ports = {
        "users": SQLitePersistence(db_path, "users", User),
        "conversations": SQLitePersistence(db_path, "conversations", Conversation),
        "messages": SQLitePersistence(db_path, "messages", Message),
        "activity": SQLitePersistence(db_path, "activity", ActivityEvent),
    }
    for port in ports.values():
        port.init_db()
    return Stores(
        users=UserStore(ports["users"]),
        conversations=ConversationStore(ports["conversations"]),
        messages=MessageStore(ports["messages"]),
        activity=ActivityFeedStore(ports["activity"]),
    )


def build_stores(settings: Settings) -> Stores:
    """Construct the stores for the configured persistence backend."""
    if settings.persistence_backend == "memory":
        logger.warning("Using in-memory persistence; data is lost on restart")
        return in_memory_stores()
    logger.info("Using SQLite persistence at %s", settings.database_path)
    return sqlite_stores(settings.database_path)
