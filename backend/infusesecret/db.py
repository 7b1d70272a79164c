from __future__ import annotations

import sqlite3
from collections.abc import Generator

from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlmodel import Session, SQLModel, create_engine

from infusesecret.config import Settings, get_settings


@event.listens_for(Engine, "connect")
def _set_sqlite_pragmas(dbapi_connection, connection_record):
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()


def build_engine(settings: Settings) -> Engine:
    """Create the process-wide engine (connection pool) for the configured URL."""
    url = make_url(settings.db_url)
    if url.get_backend_name() == "sqlite":
        return create_engine(
            settings.db_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        settings.db_url,
        echo=False,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_recycle=settings.db_pool_recycle_seconds,
    )


engine = build_engine(get_settings())


def create_db_and_tables() -> None:
    SQLModel.metadata.create_all(engine)


def dispose_engine() -> None:
    """Release every pooled connection; called on application shutdown."""
    engine.dispose()


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
