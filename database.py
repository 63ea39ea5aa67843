from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool
from fastapi import Request

# Configure logging
logger = logging.getLogger(__name__)

Base = declarative_base()


class StorageError(Exception):
    """Raised when a statement cannot be run against the store."""


class ConstraintViolation(StorageError):
    """Raised when a write breaks a unique or foreign key constraint."""


@dataclass
class ExecuteResult:
    inserted_id: Optional[int]
    rows_affected: int


class Database:
    """Persistence handle around a single SQLAlchemy engine.

    The engine is created on first use and disposed by ``close()``. Every
    ``execute`` runs in its own transaction and commits on success; reads go
    through a plain connection and always hit the store.
    """

    def __init__(self, url: str):
        self.url = url
        self._engine: Optional[Engine] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        url = make_url(self.url)
        kwargs: Dict[str, Any] = {}
        is_sqlite = url.get_backend_name() == "sqlite"
        if is_sqlite:
            kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # In-memory databases only exist for the life of one connection
                kwargs["poolclass"] = StaticPool

        # Log the database URL (with password masked for security)
        logger.info(f"Database URL is {url.render_as_string(hide_password=True)}")
        engine = create_engine(url, **kwargs)

        if is_sqlite:
            # SQLite leaves foreign keys unchecked unless enabled per connection
            @event.listens_for(engine, "connect")
            def enable_foreign_keys(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

        return engine

    def create_tables(self):
        try:
            # Register every table on Base.metadata before creating
            import contact.model  # noqa: F401
            import newsletter.model  # noqa: F401
            import booking.model  # noqa: F401
            import notifications.model  # noqa: F401

            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables created successfully")
        except Exception as e:
            logger.error(f"Error creating database tables: {str(e)}")
            raise

    def execute(self, statement) -> ExecuteResult:
        """Run a write statement and commit it."""
        try:
            with self.engine.begin() as conn:
                result = conn.execute(statement)
                inserted_id = None
                if statement.is_insert and result.inserted_primary_key:
                    inserted_id = result.inserted_primary_key[0]
                return ExecuteResult(inserted_id=inserted_id, rows_affected=result.rowcount)
        except IntegrityError as e:
            raise ConstraintViolation(str(e.orig)) from e
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def fetch_one(self, statement) -> Optional[Dict[str, Any]]:
        try:
            with self.engine.connect() as conn:
                row = conn.execute(statement).mappings().first()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        return dict(row) if row is not None else None

    def fetch_many(self, statement) -> List[Dict[str, Any]]:
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(statement).mappings().all()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        return [dict(row) for row in rows]

    def scalar(self, statement) -> Any:
        try:
            with self.engine.connect() as conn:
                return conn.execute(statement).scalar()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def close(self):
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.info("Database connection closed")


# Dependency returning the process-wide handle owned by the app
def get_db(request: Request) -> Database:
    return request.app.state.db
