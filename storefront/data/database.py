# storefront/data/database.py
import os
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from storefront.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def _enable_sqlite_pragmas(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


class Database:
    """
    Owns the engine and the session factory.

    open() is called once at process start (schema + seed), close() at
    shutdown. Request handlers never touch the engine directly, they get a
    Session from session_scope() / the get_db dependency.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = make_url(url)
        self.echo = echo
        self.engine: Engine | None = None
        self.SessionLocal: sessionmaker | None = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.get_backend_name() == "sqlite"

    def open(self, seed: bool = True) -> "Database":
        if self.engine is not None:
            return self

        connect_args = {}
        if self.is_sqlite:
            # FastAPI runs sync endpoints in a threadpool
            connect_args["check_same_thread"] = False
            self._ensure_sqlite_dir()

        self.engine = create_engine(self.url, echo=self.echo, connect_args=connect_args)
        if self.is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_pragmas)

        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

        # import all models so they are registered in Base.metadata
        from storefront.data import models  # noqa: F401

        logger.info(f"Creating tables: {sorted(Base.metadata.tables.keys())}")
        Base.metadata.create_all(bind=self.engine)

        if seed:
            from storefront.data.seed import seed_products

            with self.session_scope() as db:
                seeded, count = seed_products(db)
            if seeded:
                logger.info(f"Seeded {seeded} products ({count} in catalog)")

        return self

    def close(self) -> None:
        if self.engine is None:
            return
        self.engine.dispose()
        self.engine = None
        self.SessionLocal = None
        logger.info("Database closed")

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Commit on success, roll back on any error."""
        if self.SessionLocal is None:
            raise RuntimeError("Database is not open")

        session: Session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ping(self) -> bool:
        if self.engine is None:
            return False
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as exc:
            logger.warning(f"Database ping failed: {exc}")
            return False

    def _ensure_sqlite_dir(self) -> None:
        path = self.url.database
        if not path or path == ":memory:":
            return
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
