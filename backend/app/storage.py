"""String-keyed blob storage used by the record and goal stores."""

from typing import Optional, Protocol

from loguru import logger
from sqlalchemy.orm import Session

from app.models.kv_entry import KeyValueEntry


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class SqlKeyValueStore:
    """KeyValueStore backed by the `kv_store` table.

    Every write commits immediately; callers always rewrite a whole blob.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = self.db.get(KeyValueEntry, key)
        return row.value if row is not None else None

    def set(self, key: str, value: str) -> None:
        row = self.db.get(KeyValueEntry, key)
        if row is None:
            self.db.add(KeyValueEntry(key=key, value=value))
        else:
            row.value = value
        self.db.commit()
        logger.debug(f"Stored {len(value)} chars under '{key}'")

    def remove(self, key: str) -> None:
        row = self.db.get(KeyValueEntry, key)
        if row is None:
            return
        self.db.delete(row)
        self.db.commit()
        logger.debug(f"Removed '{key}'")
