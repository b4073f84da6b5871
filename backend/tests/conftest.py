"""
Shared fixtures.

Each test gets a fresh in-memory SQLite database; the API client talks to it
through an override of the ``get_db`` dependency.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from medicare.database import Base, get_db, init_db
from medicare.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Session for tests that work below the API."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============================================================================
# Payloads
# ============================================================================

@pytest.fixture
def patient_payload():
    return {
        'first_name': 'John',
        'last_name': 'Doe',
        'email': 'john.doe@email.com',
        'phone': '+1 (555) 123-4567',
        'date_of_birth': '1985-03-15',
        'gender': 'Male',
        'address': '123 Main St, City',
        'medical_id': 'MED001',
    }


@pytest.fixture
def doctor_payload():
    return {
        'first_name': 'Sarah',
        'last_name': 'Wilson',
        'email': 'sarah.wilson@hospital.com',
        'specialty': 'Cardiology',
        'phone': '+1 (555) 111-2222',
        'license_number': 'LIC001',
        'years_of_experience': 12,
    }


@pytest.fixture
def patient(client, patient_payload):
    """Patient created through the API."""
    response = client.post('/api/patients', json=patient_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def doctor(client, doctor_payload):
    """Doctor created through the API."""
    response = client.post('/api/doctors', json=doctor_payload)
    assert response.status_code == 201
    return response.json()
