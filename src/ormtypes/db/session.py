"""Database engine and session configuration."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from ormtypes.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base for models using the ormtypes column types."""


def create_db_engine(url: str | None = None, **kwargs: Any) -> Engine:
    """Create an engine for ``url``, defaulting to the configured database."""
    kwargs.setdefault("pool_pre_ping", True)
    kwargs.setdefault("echo", settings.sql_debug)
    return create_engine(url or settings.effective_database_url, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(engine: Engine | None = None) -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""
    factory = make_session_factory(engine or create_db_engine())
    db = factory()
    try:
        yield db
    finally:
        db.close()


def create_tables(engine: Engine) -> None:
    """Create all tables registered on :class:`Base`."""
    Base.metadata.create_all(bind=engine)


def drop_tables(engine: Engine) -> None:
    """Drop all tables registered on :class:`Base`."""
    Base.metadata.drop_all(bind=engine)
