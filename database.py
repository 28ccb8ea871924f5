# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database: engine + session factory, built once by the entry point
- get_session: FastAPI dependency yielding a request-scoped session
- commit: single-commit helper that turns store errors into PersistenceFailure

Usage:
     database = Database(settings.database_url)
     app = create_app(settings, database)

     # In FastAPI routes:
     @router.get("/items")
     def get_items(db: Session = Depends(get_session)):
          return db.query(Item).all()
"""
import logging
from contextlib import contextmanager
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from exceptions import PersistenceFailure

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
     cursor = dbapi_connection.cursor()
     cursor.execute("PRAGMA foreign_keys=ON")
     cursor.close()


class Database:
     """
     Owns the engine and session factory for one process.

     Extra keyword arguments are passed through to create_engine(), which lets
     tests swap in an in-memory SQLite engine.
     """

     def __init__(self, url: str, echo: bool = False, **engine_kwargs):
          self.url = url
          if url.startswith("sqlite"):
               engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
          else:
               engine_kwargs.setdefault("pool_size", 5)
               engine_kwargs.setdefault("max_overflow", 10)
               engine_kwargs.setdefault("pool_timeout", 30)
               engine_kwargs.setdefault("pool_recycle", 1800)  # Recycle connections after 30 minutes

          self.engine = create_engine(url, echo=echo, **engine_kwargs)
          if self.engine.dialect.name == "sqlite":
               event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

          self.SessionLocal = sessionmaker(
               bind=self.engine,
               autocommit=False,
               autoflush=False,
               expire_on_commit=False,
          )

     @contextmanager
     def session(self) -> Generator[Session, None, None]:
          """
          Context manager for database sessions (for use outside FastAPI routes).

          Usage:
               with database.session() as db:
                    users = db.query(User).all()
          """
          session = self.SessionLocal()
          try:
               yield session
               session.commit()
          except Exception:
               session.rollback()
               raise
          finally:
               session.close()

     def init_db(self) -> None:
          """
          Create all tables defined in the models if they don't exist.
          For production, use Alembic migrations instead.
          """
          from models import Base
          Base.metadata.create_all(bind=self.engine)

     def check_connection(self) -> bool:
          """Return True when a trivial query succeeds."""
          try:
               with self.engine.connect() as conn:
                    conn.execute(text("SELECT 1"))
               return True
          except SQLAlchemyError:
               logger.exception("Database connection failed")
               return False

     def dispose(self) -> None:
          self.engine.dispose()


def get_session(request: Request) -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session from the
     Database attached to the running app.

     Yields:
          Session: SQLAlchemy database session
     """
     database: Database = request.app.state.database
     session = database.SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def commit(db: Session) -> None:
     """
     Commit the pending unit of work as one atomic write.

     Raises:
          PersistenceFailure: the store rejected the write; the session is rolled back.
     """
     try:
          db.commit()
     except SQLAlchemyError as e:
          db.rollback()
          logger.error("Commit failed: %s", e, exc_info=True)
          raise PersistenceFailure() from e
