# firegear/db.py
from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from firegear.core.config import get_settings

DATABASE_URL: str

engine: AsyncEngine
SessionLocal: async_sessionmaker[AsyncSession]

_ASYNCPG_PREFIXES = (
    "postgresql+psycopg://",
    "postgresql+psycopg2://",
    "postgresql://",
    "postgres://",
)


def normalize_database_url(database_url: str) -> str:
    """Point plain/sync Postgres URLs at asyncpg; leave other dialects alone."""

    for prefix in _ASYNCPG_PREFIXES:
        if database_url.startswith(prefix):
            return "postgresql+asyncpg://" + database_url[len(prefix) :]
    return database_url


def _create_engine(database_url: str) -> AsyncEngine:
    url = make_url(database_url)
    connect_args: dict = {}

    if url.get_backend_name() == "postgresql" and url.get_driver_name() == "asyncpg":
        query = dict(url.query)
        if "sslmode" in query:
            # asyncpg takes ssl=, not sslmode=
            connect_args["ssl"] = query.pop("sslmode")
        # Neon-style URLs carry channel_binding, which asyncpg rejects
        query.pop("channel_binding", None)
        url = url._replace(query=query)

    return create_async_engine(url, pool_pre_ping=True, connect_args=connect_args)


def configure_engine(database_url: str | None = None) -> None:
    """Configure the SQLAlchemy engine and session factory."""

    global engine, SessionLocal, DATABASE_URL

    DATABASE_URL = normalize_database_url(database_url or get_settings().database_url)
    engine = _create_engine(DATABASE_URL)
    SessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_async_session() -> AsyncIterator[AsyncSession]:
    async with SessionLocal() as session:
        yield session


configure_engine()
