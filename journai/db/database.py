"""
Database engine and session factory.

The URL comes from ``settings.DB_URL``; local development defaults to a
SQLite file, production points it at the real server.
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker

from journai.core.config import settings

DATABASE_URL = settings.DATABASE_URL


def _create_engine(url: str = DATABASE_URL):
    connect_args = {}
    if make_url(url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=settings.DB_ECHO, pool_pre_ping=True, connect_args=connect_args)


engine = _create_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
