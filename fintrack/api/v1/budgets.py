from datetime import date as DateType

from fastapi import APIRouter, Depends
from pydantic import Field, model_validator

from fintrack.services.auth.utils import ensure_owner, get_current_user_id
from fintrack.services.database.models.finance.model import Budget
from fintrack.services.database.store import SQLModelFinanceStore
from fintrack.services.deps import get_store
from fintrack.services.finance.reconciliation import reconcile
from fintrack.services.finance.schema import BudgetDetail
from fintrack.services.schema import CamelModel

router = APIRouter(prefix="/budgets", tags=["budgets"])


class BudgetCreate(CamelModel):
    user_id: str
    budget_name: str = Field(min_length=1, max_length=100)
    amount: float = Field(ge=0)
    currency: str = Field(min_length=1, max_length=10)
    category: str = Field(min_length=1, max_length=50)
    recurrence: str = Field(min_length=1, max_length=20)
    start_date: DateType
    end_date: DateType

    @model_validator(mode="after")
    def check_dates(self) -> "BudgetCreate":
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class BudgetOut(CamelModel):
    id: int
    user_id: str
    budget_name: str
    amount: float
    currency: str
    category: str
    recurrence: str
    start_date: DateType
    end_date: DateType


@router.post("", response_model=BudgetOut, status_code=201)
async def create_budget(
    payload: BudgetCreate,
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    ensure_owner(payload.user_id, current_user_id)
    return await store.add_budget(Budget(**payload.model_dump()))


@router.get("/{user_id}", response_model=list[BudgetOut])
async def list_budgets(
    user_id: str,
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    ensure_owner(user_id, current_user_id)
    return await store.find_budgets_by_user(user_id)


@router.get("/{user_id}/details", response_model=list[BudgetDetail])
async def budget_details(
    user_id: str,
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    """Each budget with the amount already spent in its category and what is left."""
    ensure_owner(user_id, current_user_id)
    return await reconcile(store, user_id)
