from sqlalchemy.orm import declarative_base

from journai.db.database import SessionLocal, engine, get_db

Base = declarative_base()


def init_db(bind=None) -> None:
    """Create all tables known to the declarative base."""
    from journai import models  # noqa: F401 - registers mapped classes

    Base.metadata.create_all(bind=bind or engine)


__all__ = ["Base", "SessionLocal", "engine", "get_db", "init_db"]
