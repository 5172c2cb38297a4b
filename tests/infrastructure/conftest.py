import pytest

from orders.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from orders.infrastructure.persistence.unit_of_work import UnitOfWork


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def uow(session_factory):
    """Factory for fresh units of work against the shared in-memory db."""
    return lambda: UnitOfWork(session_factory)
