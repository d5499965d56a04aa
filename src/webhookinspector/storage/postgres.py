"""Реалізація сховища на PostgreSQL."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from webhookinspector.db.models import Webhook
from webhookinspector.records import SeedWebhook
from webhookinspector.storage.base import StorageError, WebhookSink


class PostgresWebhookSink(WebhookSink):
    """Вставляє вебхуки у таблицю webhooks, кожен у власній транзакції.

    Помилки БД і мережі перетворюються на StorageError.
    Конфлікти не обробляються: повторний запуск завжди додає нові рядки.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def insert(self, record: SeedWebhook) -> None:
        try:
            async with self._session_maker() as session:
                session.add(Webhook.from_record(record))
                await session.commit()
        except (SQLAlchemyError, OSError) as exc:
            raise StorageError(f"Не вдалося вставити вебхук {record.method} {record.pathname}") from exc


__all__ = ["PostgresWebhookSink"]
