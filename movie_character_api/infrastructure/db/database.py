"""
Database Engine
===============

SQLAlchemy declarative base, engine and session factory construction.
"""
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import MetaData

from movie_character_api.core.config import get_settings

# Deterministic constraint/index names
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

# Value range of an INTEGER column on every supported backend
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def get_engine(db_url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """Create a database engine.

    Falls back to ``settings.database_url`` when ``db_url`` is not given.
    In-memory SQLite URLs share a single connection so every session sees
    the same database.
    """
    settings = get_settings()
    chosen_url = db_url or settings.database_url

    kwargs = {
        "echo": settings.db_echo if echo is None else echo,
        "future": True,
    }
    if chosen_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in chosen_url or chosen_url == "sqlite://":
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    return create_engine(chosen_url, **kwargs)


def get_sessionmaker(engine: Engine) -> sessionmaker:
    """Get a session factory bound to ``engine``."""
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )


def create_schema(engine: Engine) -> None:
    """Create all tables known to the declarative base."""
    # Importing the models registers them on Base.metadata
    from movie_character_api.domain import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
