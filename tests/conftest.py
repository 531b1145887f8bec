"""
Shared fixtures.

The environment is pinned before anything from customer_api is imported:
an in-memory SQLite database and console-only logging.
"""
import os
from datetime import date

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from customer_api.api.customers import get_customer_service
from customer_api.main import app
from customer_api.models.base import Base, SessionLocal, engine, get_db
from customer_api.services.customer_service import CustomerService
from customer_api.stores.customer_store import CustomerStore

TODAY = date(2024, 6, 15)


@pytest.fixture
def db_session():
    """Fresh schema per test."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def today() -> date:
    """The date tiers are computed against in API tests."""
    return TODAY


@pytest.fixture
def client(db_session, today):
    """TestClient whose requests share the test's session and a fixed clock."""
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_customer_service] = lambda: CustomerService(
        CustomerStore(db_session), today=lambda: today
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
