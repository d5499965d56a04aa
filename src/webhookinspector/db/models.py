"""ORM-модель таблиці вебхуків."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

if TYPE_CHECKING:
    from webhookinspector.records import SeedWebhook

JsonType = JSON(none_as_null=True).with_variant(JSONB(none_as_null=True), "postgresql")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Базовий клас моделей."""


class Webhook(Base):
    """Зафіксований HTTP-запит до вебхука."""

    __tablename__ = "webhooks"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    method: Mapped[str] = mapped_column(String(16), nullable=False)
    pathname: Mapped[str] = mapped_column(Text, nullable=False)
    ip: Mapped[str] = mapped_column(String(64), nullable=False)
    status_code: Mapped[int] = mapped_column(nullable=False, default=200)
    content_type: Mapped[str | None] = mapped_column(String(255))
    content_length: Mapped[int | None] = mapped_column()
    query_params: Mapped[dict[str, str] | None] = mapped_column(JsonType)
    headers: Mapped[dict[str, str]] = mapped_column(JsonType, nullable=False)
    body: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, index=True
    )

    @classmethod
    def from_record(cls, record: SeedWebhook) -> Webhook:
        """Створює новий рядок таблиці з синтетичного запису."""

        return cls(
            method=record.method,
            pathname=record.pathname,
            ip=record.ip,
            status_code=record.status_code,
            content_type=record.content_type,
            content_length=record.content_length,
            query_params=dict(record.query_params) if record.query_params is not None else None,
            headers=dict(record.headers),
            body=record.body,
            created_at=record.created_at,
        )


__all__ = ["Base", "Webhook"]
