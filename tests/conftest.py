import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEFAULT_ACCOUNTS"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-the-trip-booking-suite"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tripbook.core.security import create_access_token
from tripbook.database import get_db
from tripbook.main import app
from tripbook.models import Base, Role
from tripbook.services import account_service


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _bearer(username, roles):
    return {"Authorization": f"Bearer {create_access_token(username, roles)}"}


@pytest.fixture
def admin_headers(db):
    account = account_service.register(
        db, "root", "root@example.com", "rootpwd", {Role.ROLE_ADMIN},
        first_name="Root", last_name="Admin",
    )
    return _bearer(account.username, account.role_names)


@pytest.fixture
def user_headers(db):
    account = account_service.register(
        db, "mario", "mario@example.com", "mariopwd", {Role.ROLE_USER},
        first_name="Mario", last_name="Rossi",
    )
    return _bearer(account.username, account.role_names)


@pytest.fixture
def seller_headers(db):
    account = account_service.register(db, "sally", "sally@example.com", "sallypwd", {Role.ROLE_SELLER})
    return _bearer(account.username, account.role_names)


@pytest.fixture
def employee_payload():
    return {
        "username": "Luca Bianchi",
        "first_name": "Luca",
        "last_name": "Bianchi",
        "email": "Luca.Bianchi@Example.com",
        "avatar_url": None,
    }


@pytest.fixture
def trip_payload():
    return {
        "description": "Client visit in Milan",
        "start_date": "2024-03-01",
        "end_date": "2024-03-05",
        "status": "SCHEDULED",
    }


@pytest.fixture
def employee_id(client, admin_headers, employee_payload):
    response = client.post("/api/employees", json=employee_payload, headers=admin_headers)
    assert response.status_code == 201
    return response.json()["id"]


@pytest.fixture
def trip_id(client, admin_headers, trip_payload):
    response = client.post("/api/trips", json=trip_payload, headers=admin_headers)
    assert response.status_code == 201
    return response.json()["id"]
