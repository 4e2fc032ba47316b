# /student_db/db/database.py

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .. import config

# Create a Base class. Our database model classes will inherit from this.
Base = declarative_base()


def make_engine(database_url: Optional[str] = None) -> Engine:
    """
    Creates the SQLAlchemy engine for the record store.

    Store calls run in worker threads, so SQLite connections must be allowed
    to cross threads. Other backends need no extra arguments.
    """
    url = database_url or config.DATABASE_URL
    engine_args = {"connect_args": {"check_same_thread": False}} if url.startswith("sqlite") else {}
    return create_engine(url, **engine_args)


def make_session_factory(engine: Engine) -> sessionmaker:
    # Each instance of the returned class is one short-lived database session.
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Creates the single `students` table if it does not exist yet."""
    # Importing the registry makes sure every model is attached to Base.
    from . import base  # noqa: F401

    Base.metadata.create_all(bind=engine)
