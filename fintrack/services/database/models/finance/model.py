from datetime import datetime
from datetime import date as date_type
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

from fintrack.services.database.models.user.model import utcnow


class TransactionType(str, Enum):
    CREDIT = "credit"  # money in
    DEBIT = "debit"  # money out


class Transaction(SQLModel, table=True):
    """Income or expense recorded by the user."""

    __tablename__ = "transactions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    amount: float  # always positive, sign comes from type
    description: str = Field(max_length=255)
    category: str = Field(max_length=50, index=True)
    date: date_type = Field(index=True)
    type: TransactionType = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)


class SavingsWalletEntry(SQLModel, table=True):
    """Movement in or out of the savings wallet. Never mixed with Transaction."""

    __tablename__ = "savings_wallet"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    type: TransactionType
    amount: float
    date: date_type
    created_at: datetime = Field(default_factory=utcnow)


class Budget(SQLModel, table=True):
    """Spending limit for one category."""

    __tablename__ = "budgets"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    budget_name: str = Field(max_length=100)
    amount: float  # limit
    currency: str = Field(max_length=10)
    category: str = Field(max_length=50)
    recurrence: str = Field(max_length=20)  # stored as given, not enforced
    start_date: date_type
    end_date: date_type
    created_at: datetime = Field(default_factory=utcnow)


class BankAccountTransaction(SQLModel, table=True):
    """Line imported from a bank account statement."""

    __tablename__ = "bank_account_transactions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    amount: float
    description: str = Field(max_length=255)
    category: str = Field(max_length=50)
    date: date_type = Field(index=True)
    type: TransactionType
    created_at: datetime = Field(default_factory=utcnow)
