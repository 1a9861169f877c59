"""Shared pytest fixtures and configuration."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from datetime import date
from faker import Faker

from common.db import Base
from common.enums import DenialPriority, AppealType
from main import create_app
from services.access.facade import DataAccess
from services.auth.client import AuthClient
from services.documents.storage import FileStorage
from services.remote.database import RemoteDatabase
from services.store.mock_store import MockStore
from services.denials.schemas import DenialCreate
from services.appeals.schemas import AppealCreate

fake = Faker()


def _sqlite_engine():
    return create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture(scope="function")
def store():
    """Fresh seeded mock store."""
    return MockStore()


@pytest.fixture(scope="function")
def remote_db():
    """Remote database backed by in-memory SQLite with tables created."""
    engine = _sqlite_engine()
    Base.metadata.create_all(bind=engine)
    yield RemoteDatabase(sessionmaker(autocommit=False, autoflush=False, bind=engine))
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def unavailable_remote():
    """Remote database whose tables do not exist, so every call fails."""
    engine = _sqlite_engine()
    return RemoteDatabase(sessionmaker(autocommit=False, autoflush=False, bind=engine))


@pytest.fixture(scope="function")
def auth():
    return AuthClient()


@pytest.fixture(scope="function")
def storage(tmp_path):
    return FileStorage(str(tmp_path / "uploads"), "http://testserver/files")


@pytest.fixture(scope="function")
def access(unavailable_remote, store, auth):
    """Data access that always falls back to the mock store."""
    return DataAccess(unavailable_remote, store, auth)


@pytest.fixture(scope="function")
def remote_access(remote_db, store, auth):
    """Data access with a working remote database."""
    return DataAccess(remote_db, store, auth)


@pytest.fixture(scope="function")
def client(store, unavailable_remote, auth, storage):
    """Test client running on mock data."""
    app = create_app(store=store, remote=unavailable_remote, auth=auth, storage=storage)
    yield TestClient(app)


@pytest.fixture(scope="function")
def remote_client(store, remote_db, auth, storage):
    """Test client with a working remote database."""
    app = create_app(store=store, remote=remote_db, auth=auth, storage=storage)
    yield TestClient(app)


@pytest.fixture
def sample_denial_data():
    """Generate denial form data for testing."""
    return {
        "claim_number": fake.bothify(text="CLM-####-####"),
        "patient_name": fake.name(),
        "patient_id": fake.bothify(text="PAT-###"),
        "insurance_company": fake.company(),
        "denial_date": date(2024, 2, 1).isoformat(),
        "service_date": date(2024, 1, 25).isoformat(),
        "denial_reason": "Prior authorization required",
        "denial_code": "PA001",
        "claim_amount": 1520.5,
        "priority": DenialPriority.HIGH.value,
        "assigned_to": fake.name(),
        "notes": fake.sentence(),
    }


@pytest.fixture
def sample_denial(sample_denial_data):
    return DenialCreate(**sample_denial_data)


@pytest.fixture
def sample_appeal_data():
    """Generate appeal form data for testing."""
    return {
        "denial_id": "denial_001",
        "appeal_type": AppealType.FIRST_LEVEL.value,
        "appeal_date": date(2024, 2, 2).isoformat(),
        "deadline_date": date(2024, 3, 2).isoformat(),
        "appeal_reason": "Authorization was requested before service",
        "submitted_by": fake.name(),
    }


@pytest.fixture
def sample_appeal(sample_appeal_data):
    return AppealCreate(**sample_appeal_data)
