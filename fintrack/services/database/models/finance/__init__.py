from fintrack.services.database.models.finance.model import (
    BankAccountTransaction,
    Budget,
    SavingsWalletEntry,
    Transaction,
    TransactionType,
)

__all__ = [
    "BankAccountTransaction",
    "Budget",
    "SavingsWalletEntry",
    "Transaction",
    "TransactionType",
]
