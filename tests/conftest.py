"""Pytest fixtures for test suite."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from auth_outage.actor import RequestActor, StaticActor
from auth_outage.database import Base
from auth_outage.dependencies import get_outage_repository
from auth_outage.main import app
from auth_outage.models import outage  # noqa: F401  registers auth_outage
from auth_outage.repositories.outage import OutageRepository
from auth_outage.schemas.outage import Outage
from auth_outage.store import RecordStore


class FakeClock:
    def __init__(self, now: int = 1_700_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def store(session_factory) -> RecordStore:
    return RecordStore(session_factory)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def actor() -> StaticActor:
    return StaticActor(7)


@pytest.fixture
def repository(store, actor, clock) -> OutageRepository:
    return OutageRepository(store, actor, clock=clock)


@pytest.fixture
def make_outage():
    def _make(**fields) -> Outage:
        values = {"starttime": 1000, "stoptime": 2000, "title": "Maintenance"}
        values.update(fields)
        return Outage(**values)
    return _make


@pytest.fixture(name="client")
def client_fixture(store, clock):
    repo = OutageRepository(store, RequestActor(default_id=1), clock=clock)
    app.dependency_overrides[get_outage_repository] = lambda: repo
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
