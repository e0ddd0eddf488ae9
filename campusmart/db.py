from __future__ import annotations

# campusmart/db.py
import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator

from . import schema
from .config import get_db_path

logger = logging.getLogger(__name__)


class SchemaDowngradeError(RuntimeError):
    pass


class StorageEngine:
    """
    Owns the single SQLite handle for one database file.

    The handle is opened lazily on first use and exactly once, even when
    several threads race to first access it. Every connection gets
    foreign_keys=ON and sqlite3.Row as row factory. Writers are serialized by
    SQLite itself; no extra locking is done around statements.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @property
    def connection(self) -> sqlite3.Connection:
        conn = self._conn
        if conn is None:
            with self._lock:
                if self._conn is None:
                    self._conn = self._connect_and_init()
                conn = self._conn
        return conn

    def open(self) -> sqlite3.Connection:
        """Open the handle, creating or upgrading the schema as needed."""
        return self.connection

    def _connect_and_init(self) -> sqlite3.Connection:
        conn = sqlite3.connect(
            self.db_path,
            check_same_thread=False,
            isolation_level=None,
        )
        try:
            conn.execute("PRAGMA foreign_keys = ON;")
            conn.row_factory = sqlite3.Row
            version = _user_version(conn)
            if version == 0:
                _create_schema(conn)
                logger.info("created schema v%d at %s", schema.SCHEMA_VERSION, self.db_path)
            elif version < schema.SCHEMA_VERSION:
                _reset_schema(conn, version, schema.SCHEMA_VERSION, self.db_path)
            elif version > schema.SCHEMA_VERSION:
                raise SchemaDowngradeError(
                    f"cannot downgrade {self.db_path} from v{version} to v{schema.SCHEMA_VERSION}"
                )
        except BaseException:
            conn.close()
            raise
        return conn

    def upgrade(self, old_version: int, new_version: int) -> None:
        """
        Destructive reset: a store older than the current schema loses all
        accounts and listings. Tables are dropped and recreated empty.
        """
        if old_version >= schema.SCHEMA_VERSION:
            return
        _reset_schema(self.connection, old_version, new_version, self.db_path)

    def user_version(self) -> int:
        return _user_version(self.connection)

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None


def _user_version(conn: sqlite3.Connection) -> int:
    return int(conn.execute("PRAGMA user_version").fetchone()[0])


def _create_schema(conn: sqlite3.Connection) -> None:
    with _transaction(conn):
        for stmt in schema.CREATE_STATEMENTS:
            conn.execute(stmt)
        conn.execute(f"PRAGMA user_version = {int(schema.SCHEMA_VERSION)}")


def _reset_schema(conn: sqlite3.Connection, old_version: int, new_version: int, db_path: str) -> None:
    logger.warning("schema upgrade v%d -> v%d on %s: dropping all tables", old_version, new_version, db_path)
    with _transaction(conn):
        for stmt in schema.DROP_STATEMENTS:
            conn.execute(stmt)
        for stmt in schema.CREATE_STATEMENTS:
            conn.execute(stmt)
        # always the version this code creates, whatever the caller asked for
        conn.execute(f"PRAGMA user_version = {int(schema.SCHEMA_VERSION)}")


@contextmanager
def _transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    # isolation_level=None leaves transaction control to us
    conn.execute("BEGIN")
    try:
        yield conn
    except BaseException:
        conn.execute("ROLLBACK")
        raise
    else:
        conn.execute("COMMIT")


_default_engine: StorageEngine | None = None
_default_lock = threading.Lock()


def get_engine() -> StorageEngine:
    """Process-wide engine built from configuration, created at most once."""
    global _default_engine
    engine = _default_engine
    if engine is None:
        with _default_lock:
            if _default_engine is None:
                _default_engine = StorageEngine(get_db_path())
            engine = _default_engine
    return engine


def reset_engine() -> None:
    global _default_engine
    with _default_lock:
        if _default_engine is not None:
            _default_engine.close()
        _default_engine = None


@contextmanager
def get_conn(engine: StorageEngine | None = None) -> Iterator[sqlite3.Connection]:
    """
    Yield the shared connection of `engine` (or of the default engine).
    The handle is owned by the engine and stays open after the block.
    """
    yield (engine or get_engine()).connection

