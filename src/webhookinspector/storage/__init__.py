"""Фабрика сховищ вебхуків."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from webhookinspector.config import Settings
from webhookinspector.storage.base import StorageError, WebhookSink
from webhookinspector.storage.memory import MemoryWebhookSink
from webhookinspector.storage.postgres import PostgresWebhookSink


def get_sink(
    settings: Settings,
    session_maker: async_sessionmaker[AsyncSession] | None = None,
) -> WebhookSink:
    """Повертає сховище залежно від конфігурації."""

    if settings.seed_dry_run:
        return MemoryWebhookSink()
    if session_maker is None:
        raise ValueError("Для запису в БД потрібна фабрика сесій")
    return PostgresWebhookSink(session_maker)


__all__ = ["get_sink", "MemoryWebhookSink", "PostgresWebhookSink", "StorageError", "WebhookSink"]
