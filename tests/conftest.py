"""Shared fixtures: the test schema seeded in in-memory SQLite."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from schema import Base, UserRecord, seed
from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session

from query_engine import Predicate, SpecificationEngine


@pytest.fixture
def session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as db:
        seed(db)
        yield db
    engine.dispose()


@pytest.fixture
def spec_engine() -> SpecificationEngine:
    return SpecificationEngine()


@pytest.fixture
def user_ids(session: Session) -> Callable[[Predicate], set[int]]:
    """Run a predicate against the users table and return the matching ids."""

    def run(predicate: Predicate) -> set[int]:
        stmt = select(UserRecord.id).where(predicate.to_expression(UserRecord))
        return set(session.scalars(stmt))

    return run
