from fintrack.api.v1.auth import router as auth_router
from fintrack.api.v1.bank_account import router as bank_account_router
from fintrack.api.v1.budgets import router as budgets_router
from fintrack.api.v1.health import router as health_router
from fintrack.api.v1.reports import router as reports_router
from fintrack.api.v1.savings_wallet import router as savings_wallet_router
from fintrack.api.v1.transactions import router as transactions_router
from fintrack.api.v1.users import router as users_router

__all__ = [
    "auth_router",
    "bank_account_router",
    "budgets_router",
    "health_router",
    "reports_router",
    "savings_wallet_router",
    "transactions_router",
    "users_router",
]
