"""Структуроване логування сидера через loguru."""
from __future__ import annotations

import json
import sys
from typing import Any, Dict

from loguru import logger


class JsonFormatter:
    """Форматує записи loguru як один JSON-рядок."""

    def __call__(self, record: "loguru.Record") -> str:  # type: ignore[name-defined]
        payload: Dict[str, Any] = {
            "time": record["time"].strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
            "level": record["level"].name,
            "message": record["message"],
            "module": record["module"],
            "function": record["function"],
            "line": record["line"],
        }
        if record.get("extra"):
            payload.update(record["extra"])
        if record["exception"] is not None:
            payload["error"] = repr(record["exception"].value)
        # loguru трактує результат форматера як шаблон, тому екрануємо дужки
        line = json.dumps(payload, ensure_ascii=False, default=str)
        return line.replace("{", "{{").replace("}", "}}") + "\n"


def configure_logging(level: str = "INFO") -> None:
    """Замінює стандартний обробник loguru на JSON у stdout."""

    logger.remove()
    logger.add(sys.stdout, level=level, serialize=False, format=JsonFormatter())


__all__ = ["JsonFormatter", "configure_logging", "logger"]
