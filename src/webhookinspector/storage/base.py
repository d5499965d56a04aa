"""Інтерфейс сховища вебхуків."""
from __future__ import annotations

from abc import ABC, abstractmethod

from webhookinspector.records import SeedWebhook


class StorageError(Exception):
    """Невдала вставка запису у сховище."""


class WebhookSink(ABC):
    """Приймає записи по одному; кожен виклик це рівно одна вставка."""

    @abstractmethod
    async def insert(self, record: SeedWebhook) -> None:
        """Зберігає запис або піднімає StorageError."""


__all__ = ["StorageError", "WebhookSink"]
