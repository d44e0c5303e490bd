# tests/conftest.py
from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import db
from services import DataService

NOW = datetime(2025, 3, 12, 9, 30)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def service():
    svc = DataService(clock=lambda: NOW)
    svc.load_projects()
    svc.load_mock_activities()
    return svc


@pytest.fixture
def users(service):
    return service.mock_users


@pytest.fixture
def memory_db(monkeypatch):
    engine = create_engine("sqlite://", future=True, poolclass=StaticPool,
                           connect_args={"check_same_thread": False})
    db.init_db(bind=engine)
    monkeypatch.setattr(db, "SessionLocal",
                        sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True))
    yield engine
    engine.dispose()
