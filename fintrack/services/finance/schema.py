from datetime import date as date_type
from enum import Enum
from typing import NamedTuple, Optional

from fintrack.services.schema import CamelModel


class Period(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class PeriodWindow(NamedTuple):
    start: date_type  # inclusive
    end: date_type  # inclusive


class BudgetDetail(CamelModel):
    id: Optional[int] = None
    user_id: str
    budget_name: str
    amount: float
    currency: str
    category: str
    recurrence: str
    start_date: date_type
    end_date: date_type
    spent_amount: float
    remaining_amount: float  # negative when over budget


class DailyBalance(CamelModel):
    date: date_type
    balance: float


class DailyIncomeExpenses(CamelModel):
    date: date_type
    income: float
    expenses: float
