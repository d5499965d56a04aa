"""Синтетичний запис вебхука, незалежний від ORM."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping


@dataclass(frozen=True)
class SeedWebhook:
    """Згенерований HTTP-запит із відповіддю, готовий до вставки у сховище."""

    method: str
    pathname: str
    ip: str
    status_code: int
    content_type: str | None
    content_length: int | None
    query_params: Mapping[str, str] | None
    headers: Mapping[str, str]
    body: str | None
    created_at: datetime


__all__ = ["SeedWebhook"]
