from __future__ import annotations

from functools import lru_cache

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


def build_engine(dsn: str) -> Engine:
    if dsn.startswith("sqlite"):
        # one shared connection keeps an in-memory database alive across sessions
        return create_engine(
            dsn,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(dsn, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@lru_cache(maxsize=4)
def get_engine(dsn: str) -> Engine:
    return build_engine(dsn)


@lru_cache(maxsize=4)
def get_session_factory(dsn: str) -> sessionmaker[Session]:
    return build_session_factory(get_engine(dsn))


def create_schema(engine: Engine) -> None:
    # registers the transaction tables on Base.metadata
    from farmboard.infrastructure.db.models import transactions  # noqa: F401

    Base.metadata.create_all(engine)
