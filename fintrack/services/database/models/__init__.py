from sqlmodel import SQLModel

from fintrack.services.database.models.user import User
from fintrack.services.database.models.finance import (
    BankAccountTransaction,
    Budget,
    SavingsWalletEntry,
    Transaction,
    TransactionType,
)

__all__ = [
    "SQLModel",
    "User",
    "Transaction",
    "TransactionType",
    "SavingsWalletEntry",
    "Budget",
    "BankAccountTransaction",
]
