"""In-memory сховище для сухого прогону."""
from __future__ import annotations

from webhookinspector.records import SeedWebhook
from webhookinspector.storage.base import WebhookSink


class MemoryWebhookSink(WebhookSink):
    def __init__(self) -> None:
        self.records: list[SeedWebhook] = []

    async def insert(self, record: SeedWebhook) -> None:
        self.records.append(record)


__all__ = ["MemoryWebhookSink"]
