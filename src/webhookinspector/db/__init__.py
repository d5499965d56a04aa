"""Шар доступу до БД."""

from .models import Base, Webhook
from .session import create_engine, create_session_maker, init_models

__all__ = ["Base", "Webhook", "create_engine", "create_session_maker", "init_models"]
