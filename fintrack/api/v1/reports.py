from datetime import date as DateType

from fastapi import APIRouter, Depends, Query

from fintrack.services.auth.utils import ensure_owner, get_current_user_id
from fintrack.services.database.store import SQLModelFinanceStore
from fintrack.services.deps import get_store
from fintrack.services.finance import reports
from fintrack.services.finance.schema import DailyBalance, DailyIncomeExpenses, Period

router = APIRouter(tags=["reports"])


@router.get("/balance-over-time", response_model=list[DailyBalance])
async def balance_over_time(
    user_id: str = Query(alias="userId"),
    cumulative: bool = Query(False, description="Running balance instead of each day's net"),
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    ensure_owner(user_id, current_user_id)
    return await reports.balance_over_time(store, user_id, cumulative=cumulative)


@router.get("/income-expenses", response_model=list[DailyIncomeExpenses])
async def income_expenses(
    user_id: str = Query(alias="userId"),
    period: Period = Query(),
    date: DateType = Query(description="Any day inside the wanted period"),
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    ensure_owner(user_id, current_user_id)
    return await reports.income_expenses(store, user_id, period, date)
