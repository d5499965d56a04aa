"""Створення асинхронного підключення до БД."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from webhookinspector.db.models import Base


def create_engine(database_url: str) -> AsyncEngine:
    """Створює рушій; власником є той, хто викликав, він же його закриває."""

    return create_async_engine(database_url, echo=False, future=True)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


async def init_models(engine: AsyncEngine) -> None:
    """Ініціалізує таблиці без Alembic (для розробки)."""

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


__all__ = ["create_engine", "create_session_maker", "init_models"]
