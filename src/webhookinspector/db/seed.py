"""Наповнення таблиці webhooks синтетичними запитами.

Запуск: ``python -m webhookinspector.db.seed [кількість]``.
"""
from __future__ import annotations

import asyncio
import json
import sys
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, Sequence

from pydantic import ValidationError

from webhookinspector.config import Settings, get_settings
from webhookinspector.db.session import create_engine, create_session_maker, init_models
from webhookinspector.logging import configure_logging, logger
from webhookinspector.records import SeedWebhook
from webhookinspector.storage import WebhookSink, get_sink

METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")
STATUS_CODES = (200, 201, 204, 400, 404, 422, 500)
USER_AGENTS = (
    "curl/7.68.0",
    "Mozilla/5.0 (compatible; webhook-inspector/1.0)",
    "PostmanRuntime/7.29.0",
    "axios/1.5.0",
)
JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"
DEFAULT_COUNT = 60


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def make_seed(count: int = DEFAULT_COUNT, clock: Callable[[], datetime] | None = None) -> list[SeedWebhook]:
    """Генерує ``count`` детермінованих записів; залежить лише від часу.

    Запис з індексом ``i`` створено ``i`` хвилин тому, тож найновіший
    має найменший індекс.
    """

    if count < 1:
        raise ValueError(f"Кількість записів має бути додатною, отримано {count}")
    now = clock or _utcnow
    return [_make_record(i, now()) for i in range(count)]


def _make_record(i: int, now: datetime) -> SeedWebhook:
    method = METHODS[i % len(METHODS)]
    if method == "GET":
        content_type = None
    elif i % 3 == 0:
        content_type = JSON_CONTENT_TYPE
    else:
        content_type = TEXT_CONTENT_TYPE

    query_params = None
    if i % 4 == 0:
        query_params = {"page": str(i // 10 + 1), "q": f"search-{i}"}

    headers = {
        "user-agent": USER_AGENTS[i % len(USER_AGENTS)],
        "accept": "*/*",
    }
    if content_type:
        headers["content-type"] = content_type

    if content_type == JSON_CONTENT_TYPE:
        body = json.dumps({"i": i, "ok": i % 2 == 0}, indent=2)
    elif content_type == TEXT_CONTENT_TYPE:
        body = f"plain body #{i}"
    else:
        body = None

    return SeedWebhook(
        method=method,
        pathname=f"/api/hooks/{(i % 12) + 1}",
        ip=f"192.0.2.{(i % 250) + 1}",
        status_code=STATUS_CODES[i % len(STATUS_CODES)],
        content_type=content_type,
        content_length=20 + (i % 100) if content_type else None,
        query_params=query_params,
        headers=headers,
        body=body,
        created_at=now - timedelta(minutes=i),
    )


async def insert_seed(records: Sequence[SeedWebhook], sink: WebhookSink) -> int:
    """Вставляє записи по одному та зупиняється на першій помилці."""

    logger.info(f"Inserting {len(records)} webhooks...")
    inserted = 0
    try:
        for record in records:
            await sink.insert(record)
            inserted += 1
    except Exception:
        logger.bind(inserted=inserted).exception("Failed to run seed")
        raise
    logger.bind(inserted=inserted).info(f"Seed finished: inserted {inserted}")
    return inserted


async def seed(settings: Settings) -> int:
    """Генерує та вставляє записи згідно з налаштуваннями."""

    records = make_seed(settings.seed_count)
    if settings.seed_dry_run:
        return await insert_seed(records, get_sink(settings))

    if not settings.database_url:
        raise ValueError("DATABASE_URL не задано")
    engine = create_engine(settings.database_url)
    try:
        if settings.seed_create_tables:
            await init_models(engine)
        sink = get_sink(settings, create_session_maker(engine))
        return await insert_seed(records, sink)
    finally:
        await engine.dispose()


def _parse_count(argv: Iterable[str]) -> int | None:
    args = list(argv)
    if not args:
        return None
    count = int(args[0])
    if count < 1:
        raise ValueError(f"Кількість записів має бути додатною, отримано {count}")
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Точка входу; повертає код завершення процесу."""

    try:
        count = _parse_count(sys.argv[1:] if argv is None else argv)
    except ValueError as exc:
        configure_logging()
        logger.error(f"Некоректна кількість записів: {exc}")
        return 2

    try:
        # кількість з аргументів має пріоритет над SEED_COUNT
        settings = get_settings() if count is None else Settings(SEED_COUNT=count)
    except ValidationError as exc:
        configure_logging()
        logger.error(f"Некоректна конфігурація: {exc}")
        return 1
    configure_logging(settings.log_level)

    try:
        asyncio.run(seed(settings))
    except Exception as exc:
        logger.error(f"Seed aborted: {exc!r}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
