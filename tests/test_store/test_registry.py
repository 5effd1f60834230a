"""Tests for store construction from settings."""

from chat_hub.config import Settings
from chat_hub.store.memory import InMemoryPersistence
from chat_hub.store.registry import build_stores
from chat_hub.store.sqlite import SQLitePersistence


def test_memory_backend():
    """The memory backend wires in-memory ports."""
    stores = build_stores(Settings(persistence_backend="memory", _env_file=None))
    assert isinstance(stores.users._persistence, InMemoryPersistence)
    assert not stores.users.loaded


def test_sqlite_backend_creates_tables(tmp_path):
    """The SQLite backend creates its tables so a first load succeeds."""
    db_path = str(tmp_path / "chat.db")
    stores = build_stores(
        Settings(persistence_backend="sqlite", database_path=db_path, _env_file=None)
    )
    assert isinstance(stores.messages._persistence, SQLitePersistence)

    stores.load_all()
    assert stores.conversations.get_all_conversations() == []
