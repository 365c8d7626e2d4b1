"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Credential records and tokens for each principal type
"""

import os

# Must be set before jobify.core.config is imported
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-signing-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobify.core.config import settings
from jobify.core.database import Base, get_db
from jobify.core.security import get_password_hash, token_service
from jobify.models import Admin, AdminRole, Company, PrincipalType, User
from jobify.schemas.auth import TokenPayload
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

API = settings.API_V1_STR


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_principal(db_session, model, email, password, name="Test Account", **fields):
    """Helper to insert a credential record directly."""
    record = model(
        email=email,
        name=name,
        hashed_password=get_password_hash(password),
        **fields
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record


def auth_headers(record) -> dict:
    """Bearer header for a token issued straight from a record."""
    payload = TokenPayload(
        sub=str(record.id),
        email=record.email,
        type=record.principal_type,
        role=getattr(record, "role", None),
    )
    return {"Authorization": f"Bearer {token_service.issue(payload)}"}


@pytest.fixture
def user(db_session):
    return create_principal(db_session, User, "jane@example.com", "JanePass123", name="Jane Doe")


@pytest.fixture
def company(db_session):
    return create_principal(db_session, Company, "hr@acme.com", "AcmePass123", name="Acme Corp")


@pytest.fixture
def superadmin(db_session):
    return create_principal(
        db_session, Admin, "a@x.com", "secret123", name="Super Admin", role=AdminRole.SUPERADMIN
    )


@pytest.fixture
def moderator(db_session):
    return create_principal(
        db_session, Admin, "mod@x.com", "modpass123", name="Moderator", role=AdminRole.MODERATOR
    )


@pytest.fixture
def sample_payload():
    return TokenPayload(
        sub="3f0c8e4a-2b7d-4c61-9a5e-1d2f3b4c5d6e",
        email="a@x.com",
        type=PrincipalType.ADMIN,
        role=AdminRole.SUPERADMIN,
    )
