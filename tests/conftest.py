# Test configuration and fixtures for pytest

import os

# Settings are read from the environment the first time a service asks for
# them, so these must be in place before the app is imported.
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["LOG_LEVEL"] = "DEBUG"

from datetime import date  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from fintrack.main import create_app  # noqa: E402
from fintrack.services.database.models.finance.model import Budget, Transaction, TransactionType  # noqa: E402


class FakeStore:
    """In-memory FinanceStore; records are kept in insertion order."""

    def __init__(self, budgets=(), transactions=()):
        self.budgets = list(budgets)
        self.transactions = list(transactions)

    async def find_budgets_by_user(self, user_id):
        return [b for b in self.budgets if b.user_id == user_id]

    async def find_debit_transactions_by_user(self, user_id):
        return [t for t in self.transactions if t.user_id == user_id and t.type == TransactionType.DEBIT]

    async def find_transactions_by_user(self, user_id):
        return [t for t in self.transactions if t.user_id == user_id]

    async def find_transactions_by_user_and_date_range(self, user_id, start, end):
        return [t for t in self.transactions if t.user_id == user_id and start <= t.date <= end]


def make_tx(amount, type="debit", category="food", on=date(2024, 3, 15), user_id="u1"):
    return Transaction(
        user_id=user_id,
        amount=amount,
        description=f"{category} {amount}",
        category=category,
        date=on,
        type=TransactionType(type),
    )


def make_budget(amount, category="food", name=None, user_id="u1"):
    return Budget(
        user_id=user_id,
        budget_name=name or f"{category} budget",
        amount=amount,
        currency="EUR",
        category=category,
        recurrence="monthly",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
    )


def register(client: TestClient, email="ada@example.com", password="s3cret!"):
    """Create an account and return (user id, auth headers)."""
    response = client.post(
        "/api/v1/auth/register",
        json={"firstName": "Ada", "lastName": "Lovelace", "email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    data = response.json()
    return data["user"]["id"], {"Authorization": f"Bearer {data['access']}"}


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="function")
def client():
    """
    TestClient running the app lifespan, so every test gets fresh tables in
    an in-memory SQLite database that is dropped on exit.
    """
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user(client):
    return register(client)
