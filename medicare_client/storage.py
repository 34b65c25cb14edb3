"""Durable key/value storage for session data.

Pattern: Thin wrapper around SQLAlchemy, one row per key. Reads and writes
are synchronous and commit immediately. There is no cross-process locking:
when two processes share a database the last writer wins.
"""
from typing import List, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from medicare_client.database_models import Base, StorageItem


class KeyValueStorage:
    """
    String key/value store backed by a SQL database.

    Mirrors the browser localStorage contract: get_item returns None for
    missing keys, set_item overwrites, remove_item is a no-op for missing keys.
    """

    def __init__(self, database_url: str):
        """
        Initialize storage with database connection.

        Args:
            database_url: SQLAlchemy connection string
        """
        if database_url.startswith("sqlite") and ":memory:" in database_url:
            # One shared connection, otherwise each thread sees an empty database
            self.engine = create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            self.engine = create_engine(database_url, pool_pre_ping=True)
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine)

    def get_item(self, key: str) -> Optional[str]:
        with self.SessionLocal() as db:
            item = db.get(StorageItem, key)
            return item.value if item else None

    def set_item(self, key: str, value: str) -> None:
        with self.SessionLocal() as db:
            item = db.get(StorageItem, key)
            if item is None:
                db.add(StorageItem(key=key, value=value))
            else:
                item.value = value
            db.commit()

    def remove_item(self, key: str) -> None:
        with self.SessionLocal() as db:
            db.query(StorageItem).filter(StorageItem.key == key).delete()
            db.commit()

    def keys(self) -> List[str]:
        """List stored keys in sorted order."""
        with self.SessionLocal() as db:
            return sorted(row.key for row in db.query(StorageItem).all())

    def clear(self) -> int:
        """
        Remove every key.

        Returns:
            Number of deleted keys
        """
        with self.SessionLocal() as db:
            deleted = db.query(StorageItem).delete()
            db.commit()

        return deleted

    def close(self) -> None:
        """Dispose the connection pool."""
        self.engine.dispose()
