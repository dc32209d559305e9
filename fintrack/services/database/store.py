"""
Store access for the finance tables.

`FinanceStore` is the read interface the reconciliation engine and the
reporters depend on. `SQLModelFinanceStore` implements it over one request's
`AsyncSession` and adds the write and listing operations used by the routes.
"""
from datetime import date as date_type
from typing import Protocol, Sequence

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from fintrack.services.database.models.finance.model import (
    BankAccountTransaction,
    Budget,
    SavingsWalletEntry,
    Transaction,
    TransactionType,
)


class FinanceStore(Protocol):
    async def find_budgets_by_user(self, user_id: str) -> Sequence[Budget]: ...

    async def find_debit_transactions_by_user(self, user_id: str) -> Sequence[Transaction]: ...

    async def find_transactions_by_user(self, user_id: str) -> Sequence[Transaction]: ...

    async def find_transactions_by_user_and_date_range(
        self, user_id: str, start: date_type, end: date_type
    ) -> Sequence[Transaction]: ...


class SQLModelFinanceStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    # ============== reads used by the engine ==============

    async def find_budgets_by_user(self, user_id: str) -> Sequence[Budget]:
        # autoincrement id keeps insertion order
        query = select(Budget).where(Budget.user_id == user_id).order_by(col(Budget.id))
        return (await self.session.exec(query)).all()

    async def find_debit_transactions_by_user(self, user_id: str) -> Sequence[Transaction]:
        query = select(Transaction).where(
            Transaction.user_id == user_id,
            Transaction.type == TransactionType.DEBIT,
        )
        return (await self.session.exec(query)).all()

    async def find_transactions_by_user(self, user_id: str) -> Sequence[Transaction]:
        query = select(Transaction).where(Transaction.user_id == user_id)
        return (await self.session.exec(query)).all()

    async def find_transactions_by_user_and_date_range(
        self, user_id: str, start: date_type, end: date_type
    ) -> Sequence[Transaction]:
        """Both bounds inclusive."""
        query = select(Transaction).where(
            Transaction.user_id == user_id,
            Transaction.date >= start,
            Transaction.date <= end,
        )
        return (await self.session.exec(query)).all()

    # ============== listings ==============

    async def list_transactions(self, user_id: str) -> Sequence[Transaction]:
        query = (
            select(Transaction)
            .where(Transaction.user_id == user_id)
            .order_by(col(Transaction.date).desc(), col(Transaction.id).desc())  # newest first
        )
        return (await self.session.exec(query)).all()

    async def find_wallet_entries_by_user(self, user_id: str) -> Sequence[SavingsWalletEntry]:
        query = select(SavingsWalletEntry).where(SavingsWalletEntry.user_id == user_id).order_by(
            col(SavingsWalletEntry.id)
        )
        return (await self.session.exec(query)).all()

    async def find_bank_account_transactions_by_user(self, user_id: str) -> Sequence[BankAccountTransaction]:
        query = (
            select(BankAccountTransaction)
            .where(BankAccountTransaction.user_id == user_id)
            .order_by(col(BankAccountTransaction.date), col(BankAccountTransaction.id))
        )
        return (await self.session.exec(query)).all()

    # ============== writes ==============

    async def add_transaction(self, tx: Transaction) -> Transaction:
        return await self._save(tx)

    async def add_budget(self, budget: Budget) -> Budget:
        return await self._save(budget)

    async def add_wallet_entry(self, entry: SavingsWalletEntry) -> SavingsWalletEntry:
        return await self._save(entry)

    async def add_bank_account_transactions(self, rows: Sequence[BankAccountTransaction]) -> int:
        # one commit for the whole statement
        self.session.add_all(rows)
        await self.session.commit()
        return len(rows)

    async def _save(self, record):
        self.session.add(record)
        await self.session.commit()
        await self.session.refresh(record)
        return record
