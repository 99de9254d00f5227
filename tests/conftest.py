"""
Shared test fixtures for pytest
"""

import pytest
from fastapi.testclient import TestClient

from app.routes.diagram import get_sanitize_policy
from app.services.history_store import StorageError, get_history_store
from main import app


class InMemoryHistoryStore:
    """Dict-backed stand-in for HistoryStore"""

    def __init__(self):
        self.records = {}

    def get_last_input(self, email):
        return self.records.get(email)

    def upsert(self, email, markup):
        self.records[email] = markup


class FailingHistoryStore:
    """Every operation fails the way a lost database connection does"""

    def get_last_input(self, email):
        raise StorageError("connection refused")

    def upsert(self, email, markup):
        raise StorageError("connection refused")


@pytest.fixture
def history_store():
    return InMemoryHistoryStore()


@pytest.fixture
def client(history_store):
    """TestClient wired to an in-memory store (startup events are not run)"""
    app.dependency_overrides[get_history_store] = lambda: history_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    app.dependency_overrides[get_history_store] = lambda: FailingHistoryStore()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def address_policy_client(history_store):
    app.dependency_overrides[get_history_store] = lambda: history_store
    app.dependency_overrides[get_sanitize_policy] = lambda: "address"
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def lan_query():
    return {
        "n": "10.0.0.0/24",
        "r": "10.0.0.1",
        "h0": "10.0.0.2",
        "h1": "10.0.0.3",
        "br": "10.0.0.255",
    }
