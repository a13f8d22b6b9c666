"""SQLite connection management for the record store."""

import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from peewee import PeeweeException, SqliteDatabase

from afropair.database.models import MODELS, create_tables
from afropair.exceptions import PersistenceError
from afropair.logging_config import get_logger

logger = get_logger(__name__)

# Model binding is class-level state shared by every manager.
_BIND_LOCK = threading.RLock()


class DatabaseManager:
    """Owns one SQLite database file.

    Several managers may be open at once on different paths. The models are
    bound to a manager's database only inside ``bound()``, so each manager
    reads and writes its own file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._db: SqliteDatabase | None = None

    @property
    def is_open(self) -> bool:
        return self._db is not None

    def open(self) -> SqliteDatabase:
        if self._db is not None:
            return self._db
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            db = SqliteDatabase(
                str(self.path),
                pragmas={"journal_mode": "wal", "foreign_keys": 1},
            )
            db.connect(reuse_if_open=True)
            with _BIND_LOCK:
                create_tables(db)
        except (OSError, PeeweeException) as e:
            raise PersistenceError(f"Failed to open database {self.path}", details=str(e)) from e

        self._db = db
        logger.info("Database initialized", path=str(self.path))
        return db

    @contextmanager
    def bound(self) -> Iterator[SqliteDatabase]:
        """Bind the models to this database for the duration of the block."""
        db = self.open()
        with _BIND_LOCK:
            with db.bind_ctx(MODELS):
                yield db

    def close(self) -> None:
        if self._db is None:
            return
        if not self._db.is_closed():
            self._db.close()
        self._db = None
        logger.debug("Database closed", path=str(self.path))
