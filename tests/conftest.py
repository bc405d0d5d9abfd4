from __future__ import annotations

import asyncio
import datetime
import sqlite3

import pytest
from fastapi.testclient import TestClient

from invoice_dashboard_api.app.core.config import settings
from invoice_dashboard_api.app.core.db import init_db
from invoice_dashboard_api.app.core.navigation import view_cache
from invoice_dashboard_api.app.schemas.auth import UserCreate
from invoice_dashboard_api.app.schemas.customer import CustomerCreate
from invoice_dashboard_api.app.services.customer_service import CustomerService
from invoice_dashboard_api.app.services.user_service import UserService


USER_EMAIL = "user@nextmail.com"
USER_PASSWORD = "123456"


class RecordingRepository:
    """Stands in for ``InvoiceRepository`` and remembers every call."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[tuple] = []

    def insert_invoice(self, customer_id, amount, status, date):
        self.calls.append(("insert", customer_id, amount, status, date))
        if self.error:
            raise self.error
        return "inv-1"

    def update_invoice(self, invoice_id, customer_id, amount, status):
        self.calls.append(("update", invoice_id, customer_id, amount, status))
        if self.error:
            raise self.error

    def delete_invoice(self, invoice_id):
        self.calls.append(("delete", invoice_id))
        if self.error:
            raise self.error


class RecordingCache:
    def __init__(self) -> None:
        self.invalidated: list[str] = []

    def invalidate(self, path: str) -> None:
        self.invalidated.append(path)


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file with the schema applied."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "invoices.db"))
    init_db()
    view_cache.clear()
    yield tmp_path / "invoices.db"
    view_cache.clear()


@pytest.fixture
def customer(database):
    return asyncio.run(
        CustomerService.create_customer(
            CustomerCreate(name="Lee Robinson", email="lee@robinson.com", image_url="/customers/lee.png")
        )
    )


@pytest.fixture
def user(database):
    return asyncio.run(
        UserService.create_user(UserCreate(name="User", email=USER_EMAIL, password=USER_PASSWORD))
    )


@pytest.fixture
def client(database):
    from invoice_dashboard_api.app.main import app

    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client


@pytest.fixture
def signed_in_client(client, user):
    response = client.post("/login", data={"email": USER_EMAIL, "password": USER_PASSWORD})
    assert response.status_code == 303
    return client


@pytest.fixture
def fixed_today():
    return lambda: datetime.date(2026, 10, 17)


@pytest.fixture
def repository():
    return RecordingRepository()


@pytest.fixture
def failing_repository():
    return RecordingRepository(error=sqlite3.OperationalError("database is locked"))


@pytest.fixture
def cache():
    return RecordingCache()
