"""
Database configuration and session management
"""
from contextlib import contextmanager
from typing import Generator
import logging

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


class Database:
    """
    Store handle owning the SQLAlchemy engine and session factory.

    One instance is built per application (see treehole.main.create_app)
    and handed to the services that need it.
    """

    def __init__(self, url: str, timeout: int = 30, echo: bool = False):
        self.url = url
        self.engine: Engine = self._create_engine(url, timeout, echo)
        self._session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    @staticmethod
    def _create_engine(url: str, timeout: int, echo: bool) -> Engine:
        connect_args = {}
        if url.startswith("sqlite"):
            # Requests run on a threadpool; SQLite serialises the writers
            connect_args = {"check_same_thread": False, "timeout": timeout}

        logger.info(f"Creating database engine for {url.split('://')[0]}")
        try:
            return create_engine(
                url,
                connect_args=connect_args,
                pool_pre_ping=True,
                echo=echo,
            )
        except Exception as e:
            logger.error(f"Failed to create database engine: {e}")
            raise

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Yield a session, rolling back on error and always closing it"""
        db = self._session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def init_schema(self) -> None:
        """
        Create tables if needed and upgrade legacy databases.

        Safe to run on every startup. A messages table created before the
        like counter existed gets a ``likes`` column defaulting to 0.
        Rows left with a NULL counter by older servers are reset to 0.
        """
        # Import models so they register on Base.metadata
        from treehole import models  # noqa: F401

        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables initialized")

            columns = {col["name"] for col in inspect(self.engine).get_columns("messages")}
            if "likes" not in columns:
                with self.engine.begin() as conn:
                    conn.execute(text(
                        "ALTER TABLE messages ADD COLUMN likes INTEGER NOT NULL DEFAULT 0"
                    ))
                logger.info("Added likes column to messages table")
            else:
                with self.engine.begin() as conn:
                    result = conn.execute(text(
                        "UPDATE messages SET likes = 0 WHERE likes IS NULL"
                    ))
                if result.rowcount:
                    logger.info(f"Reset NULL likes to 0 on {result.rowcount} messages")
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()
