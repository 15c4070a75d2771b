"""Database connection and session management."""

from contextlib import contextmanager
from pathlib import Path
from typing import Generator
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from errors import StartupError
from models import Base
import logging

logger = logging.getLogger(__name__)


class DatabaseManager:
    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine = None
        self.SessionLocal = None

    def initialize(self):
        """Connect to the database and create missing tables.

        Raises StartupError if the URL is invalid or the database cannot be
        reached.
        """
        try:
            url = make_url(self.database_url)
        except ArgumentError as e:
            raise StartupError(f"Invalid database URL: {e}") from e

        connect_args = {}
        poolclass = None
        if url.get_backend_name() == "sqlite":
            connect_args = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # In-memory databases live in a single connection
                poolclass = StaticPool
            else:
                try:
                    Path(url.database).parent.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise StartupError(f"Cannot create database directory: {e}") from e

        try:
            self.engine = create_engine(
                url,
                connect_args=connect_args,
                poolclass=poolclass,
                echo=self.echo
            )
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))

            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            if self.engine is not None:
                self.engine.dispose()
                self.engine = None
            raise StartupError(f"Could not connect to database: {e}") from e

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

        logger.info(f"Database initialized at {url.render_as_string(hide_password=True)}")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a database session that commits on success."""
        if not self.SessionLocal:
            self.initialize()

        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close database connection."""
        if self.engine:
            self.engine.dispose()
            logger.info("Database connection closed")
