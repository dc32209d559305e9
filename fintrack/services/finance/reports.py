"""
Balance and income/expense aggregates over a user's transactions.

Credits count as +amount, anything else as -amount. All sums go through
math.fsum so the result does not depend on the order the store returns rows.
"""
import math
from collections import defaultdict
from datetime import date as date_type
from itertools import accumulate
from typing import Iterable

from dateutil.relativedelta import MO, SU, relativedelta

from fintrack.services.database.models.finance.model import Transaction, TransactionType
from fintrack.services.database.store import FinanceStore
from fintrack.services.finance.schema import DailyBalance, DailyIncomeExpenses, Period, PeriodWindow


def signed_amount(tx: Transaction) -> float:
    return tx.amount if tx.type == TransactionType.CREDIT else -tx.amount


def net_total(transactions: Iterable[Transaction]) -> float:
    return math.fsum(signed_amount(tx) for tx in transactions)


async def balance(store: FinanceStore, user_id: str) -> float:
    return net_total(await store.find_transactions_by_user(user_id))


async def balance_over_time(store: FinanceStore, user_id: str, cumulative: bool = False) -> list[DailyBalance]:
    """
    Net amount per calendar day, oldest first.

    With `cumulative` each day carries the running balance up to and
    including that day instead of that day's net.
    """
    by_day: dict[date_type, list[Transaction]] = defaultdict(list)
    for tx in await store.find_transactions_by_user(user_id):
        by_day[tx.date].append(tx)

    days = sorted(by_day)
    nets = [net_total(by_day[day]) for day in days]
    if cumulative:
        nets = list(accumulate(nets))
    return [DailyBalance(date=day, balance=net) for day, net in zip(days, nets)]


def period_window(period: Period, anchor: date_type) -> PeriodWindow:
    """Inclusive day, ISO week (Monday to Sunday) or calendar month containing `anchor`."""
    period = Period(period)  # raises ValueError for an unknown period
    if period is Period.DAY:
        return PeriodWindow(anchor, anchor)
    if period is Period.WEEK:
        # MO(-1) and SU(+1) leave the anchor alone when it already is Monday or Sunday
        return PeriodWindow(anchor + relativedelta(weekday=MO(-1)), anchor + relativedelta(weekday=SU(+1)))
    month_start = anchor.replace(day=1)
    # last day of the month: one month on, one day back
    return PeriodWindow(month_start, month_start + relativedelta(months=1, days=-1))


async def income_expenses(
    store: FinanceStore, user_id: str, period: Period, anchor: date_type
) -> list[DailyIncomeExpenses]:
    window = period_window(period, anchor)
    transactions = await store.find_transactions_by_user_and_date_range(user_id, window.start, window.end)

    income: dict[date_type, list[float]] = defaultdict(list)
    expenses: dict[date_type, list[float]] = defaultdict(list)
    for tx in transactions:
        if tx.type == TransactionType.CREDIT:
            income[tx.date].append(tx.amount)
        # other types are neither income nor expense
        elif tx.type == TransactionType.DEBIT:
            expenses[tx.date].append(tx.amount)

    return [
        DailyIncomeExpenses(date=day, income=math.fsum(income[day]), expenses=math.fsum(expenses[day]))
        for day in sorted(income.keys() | expenses.keys())
    ]
