# Tests for the SQLModel-backed store on an in-memory SQLite database.

from contextlib import asynccontextmanager
from datetime import date

import pytest

from conftest import make_budget, make_tx
from fintrack.services.database.models.finance.model import TransactionType
from fintrack.services.database.service import DatabaseService
from fintrack.services.database.store import SQLModelFinanceStore
from fintrack.services.finance.reconciliation import reconcile
from fintrack.services.settings.base import Settings
from fintrack.services.settings.service import SettingsService

pytestmark = pytest.mark.anyio


@asynccontextmanager
async def sqlite_store():
    settings = Settings(ENVIRONMENT="test", DATABASE_URL="sqlite+aiosqlite://", JWT_SECRET="test-secret")
    db_service = DatabaseService(SettingsService(settings))
    await db_service.create_db_and_tables()
    try:
        async with db_service.with_session() as session:
            yield SQLModelFinanceStore(session)
    finally:
        await db_service.teardown()


async def test_debit_lookup_filters_owner_and_type():
    async with sqlite_store() as store:
        await store.add_transaction(make_tx(10, type="debit"))
        await store.add_transaction(make_tx(20, type="credit"))
        await store.add_transaction(make_tx(30, type="debit", user_id="u2"))

        debits = await store.find_debit_transactions_by_user("u1")
        assert [tx.amount for tx in debits] == [10]
        assert debits[0].type == TransactionType.DEBIT
        assert len(await store.find_transactions_by_user("u1")) == 2


async def test_date_range_lookup_is_inclusive():
    async with sqlite_store() as store:
        for day in (date(2024, 2, 29), date(2024, 3, 1), date(2024, 3, 31), date(2024, 4, 1)):
            await store.add_transaction(make_tx(1, on=day))

        rows = await store.find_transactions_by_user_and_date_range("u1", date(2024, 3, 1), date(2024, 3, 31))
        assert sorted(tx.date for tx in rows) == [date(2024, 3, 1), date(2024, 3, 31)]


async def test_budgets_come_back_in_insertion_order():
    async with sqlite_store() as store:
        for name in ("Rent", "Food", "Fun"):
            await store.add_budget(make_budget(100, name=name, category=name.lower()))

        budgets = await store.find_budgets_by_user("u1")
        assert [b.budget_name for b in budgets] == ["Rent", "Food", "Fun"]


async def test_reconcile_against_database():
    async with sqlite_store() as store:
        await store.add_budget(make_budget(200, category="food"))
        await store.add_transaction(make_tx(50, category="food"))
        await store.add_transaction(make_tx(30, category="food"))
        await store.add_transaction(make_tx(999, type="credit", category="food"))

        [detail] = await reconcile(store, "u1")
        assert (detail.spent_amount, detail.remaining_amount) == (80, 120)
        assert detail.id is not None


async def test_unknown_user_has_no_rows():
    async with sqlite_store() as store:
        await store.add_transaction(make_tx(10))
        assert await store.find_transactions_by_user("not-a-real-id") == []
        assert await store.find_budgets_by_user("not-a-real-id") == []
