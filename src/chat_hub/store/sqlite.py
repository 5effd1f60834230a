"""SQLite persistence adapter.

One table per entity kind. Each row holds the entity's JSON payload; rows are
upserted by id and read back in first-insert order, which is the order the
stores need on startup.
"""

import logging
import sqlite3
from typing import Generic

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from chat_hub.store.ports import E

logger = logging.getLogger(__name__)


def _is_retryable(error: BaseException) -> bool:
    """Only lock contention is transient; every other SQLite error is permanent."""
    return isinstance(error, sqlite3.OperationalError) and "locked" in str(error).lower()


_retry_on_lock = retry(
    retry=retry_if_exception(_is_retryable),
    wait=wait_exponential_jitter(initial=0.05, max=1, jitter=0.05),
    stop=stop_after_attempt(4),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)


class SQLitePersistence(Generic[E]):
    """Thin SQLite wrapper that satisfies the PersistencePort contract."""

    def __init__(self, db_path: str, table: str, model: type[E]) -> None:
        if not table.isidentifier():
            raise ValueError(f"Invalid table name: {table!r}")
        self._db_path = db_path
        self._table = table
        self._model = model

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, timeout=5.0)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        """Create the entity table if it does not exist.

        ``seq`` preserves first-insert order across upserts; ``id`` is the
        entity's UUID and ``payload`` its JSON serialization.
        """
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    f"""
                    CREATE TABLE IF NOT EXISTS {self._table} (
                        seq INTEGER PRIMARY KEY AUTOINCREMENT,
                        id TEXT NOT NULL UNIQUE,
                        payload TEXT NOT NULL
                    )
                    """
                )
        finally:
            conn.close()

    @_retry_on_lock
    def load_all(self) -> list[E]:
        conn = self._connect()
        try:
            rows = conn.execute(f"SELECT payload FROM {self._table} ORDER BY seq").fetchall()
        finally:
            conn.close()
        return [self._model.model_validate_json(row["payload"]) for row in rows]

    @_retry_on_lock
    def write_through(self, entity: E) -> None:
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    f"""
                    INSERT INTO {self._table} (id, payload) VALUES (?, ?)
                    ON CONFLICT(id) DO UPDATE SET payload = excluded.payload
                    """,
                    (str(entity.id), entity.model_dump_json()),
                )
        finally:
            conn.close()
