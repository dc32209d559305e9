from fintrack.services.finance.reconciliation import reconcile
from fintrack.services.finance.reports import balance, balance_over_time, income_expenses, period_window

__all__ = ["reconcile", "balance", "balance_over_time", "income_expenses", "period_window"]
