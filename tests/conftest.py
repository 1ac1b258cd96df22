"""Shared fixtures: in-memory SQLite session, service and HTTP client."""

import os
import tempfile

# Must be set before app.config settings are first read
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="work-entry-logs-"))

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models.work_entry import ProgramType
from app.schemas.work_entry import CreateWorkEntryRequest
from app.services.work_entry_service import WorkEntryService


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def service(db_session):
    return WorkEntryService(db_session)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def days_ago(n: int) -> date:
    return date.today() - timedelta(days=n)


def make_request(**overrides) -> CreateWorkEntryRequest:
    fields = dict(
        work_date=days_ago(1),
        program_type=ProgramType.CLIENT,
        program_reference="ACME-Portal",
        ticket_id="PROJ-123",
        description="Implemented login flow",
        hours_spent=8.0,
    )
    fields.update(overrides)
    return CreateWorkEntryRequest(**fields)
