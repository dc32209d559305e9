"""
Budget reconciliation: how much of each budget the user has already spent.

Spend is the sum of the user's debit transactions in the budget's category.
Budget date windows and recurrence are stored but not applied here.
"""
import math
from collections import defaultdict
from typing import Iterable

from loguru import logger

from fintrack.services.database.models.finance.model import Transaction
from fintrack.services.database.store import FinanceStore
from fintrack.services.finance.schema import BudgetDetail


def spent_by_category(debits: Iterable[Transaction]) -> dict[str, float]:
    amounts: dict[str, list[float]] = defaultdict(list)
    for tx in debits:
        amounts[tx.category].append(tx.amount)
    return {category: math.fsum(values) for category, values in amounts.items()}


async def reconcile(store: FinanceStore, user_id: str) -> list[BudgetDetail]:
    """
    One BudgetDetail per budget of `user_id`, in the order the store returns them.

    `user_id` must already be authorized against the caller. Store errors
    propagate unchanged.
    """
    budgets = await store.find_budgets_by_user(user_id)
    debits = await store.find_debit_transactions_by_user(user_id)
    spent = spent_by_category(debits)

    details = []
    for budget in budgets:
        spent_amount = spent.get(budget.category, 0.0)
        details.append(
            BudgetDetail(
                **budget.model_dump(exclude={"created_at"}),
                spent_amount=spent_amount,
                remaining_amount=budget.amount - spent_amount,
            )
        )
    logger.debug(f"Reconciled {len(details)} budgets against {len(debits)} debits for user {user_id}")
    return details
