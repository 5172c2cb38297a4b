"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from orders.infrastructure import seed
from orders.infrastructure.config import Settings, load_settings
from orders.infrastructure.persistence.database import build_engine, build_session_factory
from orders.infrastructure.persistence.unit_of_work import UnitOfWork


@lru_cache(maxsize=1)
def settings() -> Settings:
    return load_settings()


@lru_cache(maxsize=1)
def engine() -> Engine:
    cfg = settings()
    db_path = cfg.database_url.removeprefix("sqlite:///")
    if db_path != cfg.database_url and db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return build_engine(cfg.database_url, echo=cfg.echo_sql)


@lru_cache(maxsize=1)
def session_factory() -> sessionmaker:
    return build_session_factory(engine())


@lru_cache(maxsize=1)
def prepare_store() -> None:
    """Create the schema and seed sample data once, when enabled."""
    if settings().seed_on_startup:
        seed.initialize(engine(), session_factory())


def unit_of_work() -> UnitOfWork:
    prepare_store()
    return UnitOfWork(session_factory())


def reset() -> None:
    """Forget cached settings and engine (used after the environment changes)."""
    if engine.cache_info().currsize:
        engine().dispose()
    prepare_store.cache_clear()
    session_factory.cache_clear()
    engine.cache_clear()
    settings.cache_clear()
