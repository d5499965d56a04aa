"""Загальні фікстури та асинхронний раннер для pytest."""
from __future__ import annotations

import asyncio
import inspect
import sys
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, AsyncIterator, Iterator

import pytest

# Додаємо src до sys.path, щоб імпортувати webhookinspector без інсталяції пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

from loguru import logger  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: E402

from webhookinspector.db.session import create_engine, create_session_maker, init_models  # noqa: E402

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Реєструє ini-опцію asyncio_mode для сумісності з pytest-asyncio."""

    parser.addini(
        "asyncio_mode",
        "Режим роботи кастомного asyncio-плагіна (для сумісності з pytest-asyncio)",
        default="auto",
    )


class _LoopManager:
    """Керує asyncio-loop, у якому виконуються тести та фікстури."""

    def __init__(self) -> None:
        self._loop = asyncio.new_event_loop()

    def run(self, awaitable: Awaitable[Any]) -> Any:
        asyncio.set_event_loop(self._loop)
        try:
            return self._loop.run_until_complete(awaitable)
        finally:
            asyncio.set_event_loop(None)

    def close(self) -> None:
        """Завершує асинхронні генератори та закриває цикл."""

        asyncio.set_event_loop(self._loop)
        try:
            self._loop.run_until_complete(self._loop.shutdown_asyncgens())
        finally:
            asyncio.set_event_loop(None)
            self._loop.close()


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "asyncio: запускати тест у циклі подій asyncio без pytest-asyncio",
    )


_loop_manager: _LoopManager | None = None


def _shared_loop() -> _LoopManager:
    """Один цикл подій на сесію: async-фікстури та тести ділять зʼєднання."""

    global _loop_manager
    if _loop_manager is None:
        _loop_manager = _LoopManager()
    return _loop_manager


def pytest_unconfigure(config: pytest.Config) -> None:
    global _loop_manager
    if _loop_manager is not None:
        _loop_manager.close()
        _loop_manager = None


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Дозволяє виконувати async def тести без додаткових плагінів."""

    if not inspect.iscoroutinefunction(pyfuncitem.obj):
        return None
    testargs = {name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames}
    _shared_loop().run(pyfuncitem.obj(**testargs))
    return True


@pytest.hookimpl(tryfirst=True)
def pytest_fixture_setup(
    fixturedef: pytest.FixtureDef[Any], request: pytest.FixtureRequest
) -> Any:
    """Запускає асинхронні фікстури у спільному циклі подій."""

    func = fixturedef.func
    if inspect.isasyncgenfunction(func):
        manager = _shared_loop()
        kwargs = {name: request.getfixturevalue(name) for name in (fixturedef.argnames or ())}
        async_gen = func(**kwargs)
        cache_key = fixturedef.cache_key(request)
        try:
            value = manager.run(async_gen.__anext__())
        except StopAsyncIteration as exc:  # pragma: no cover - захист від неправильного використання
            raise RuntimeError("Асинхронна фікстура повинна містити хоча б один yield") from exc
        except BaseException as exc:  # pragma: no cover - передаємо помилку далі
            fixturedef.cached_result = (None, cache_key, (exc, exc.__traceback__))
            raise
        fixturedef.cached_result = (value, cache_key, None)

        def finalizer() -> None:
            try:
                manager.run(async_gen.__anext__())
            except StopAsyncIteration:
                return
            raise RuntimeError("Асинхронна фікстура може повертати лише одне значення")

        request.addfinalizer(finalizer)
        return value

    if inspect.iscoroutinefunction(func):
        kwargs = {name: request.getfixturevalue(name) for name in (fixturedef.argnames or ())}
        cache_key = fixturedef.cache_key(request)
        try:
            result = _shared_loop().run(func(**kwargs))
        except BaseException as exc:  # pragma: no cover - передаємо помилку далі
            fixturedef.cached_result = (None, cache_key, (exc, exc.__traceback__))
            raise
        fixturedef.cached_result = (result, cache_key, None)
        return result

    return None


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    """Годинник, що завжди повертає той самий момент."""

    return lambda: FIXED_NOW


@pytest.fixture()
def log_records() -> Iterator[list[dict[str, Any]]]:
    """Збирає записи loguru у список для перевірок."""

    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)


@pytest.fixture()
def database_url(tmp_path: Path) -> str:
    """URL окремого sqlite-файлу для кожного тесту."""

    return f"sqlite+aiosqlite:///{tmp_path / 'seed.db'}"


@pytest.fixture()
async def session_maker(database_url: str) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Фабрика сесій поверх sqlite-файлу зі створеною схемою."""

    engine = create_engine(database_url)
    await init_models(engine)
    yield create_session_maker(engine)
    await engine.dispose()
