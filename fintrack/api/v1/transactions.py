from datetime import date as DateType, datetime

from fastapi import APIRouter, Depends, Query
from fastapi_pagination import Page, paginate
from pydantic import BaseModel, Field

from fintrack.services.auth.utils import ensure_owner, get_current_user_id
from fintrack.services.database.models.finance.model import Transaction, TransactionType
from fintrack.services.database.store import SQLModelFinanceStore
from fintrack.services.deps import get_store
from fintrack.services.finance import reports
from fintrack.services.schema import CamelModel

router = APIRouter(prefix="/transactions", tags=["transactions"])


class TransactionCreate(CamelModel):
    user_id: str
    amount: float = Field(gt=0)
    description: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=50)
    date: DateType
    type: TransactionType


class TransactionOut(CamelModel):
    id: int
    user_id: str
    amount: float
    description: str
    category: str
    date: DateType
    type: TransactionType
    created_at: datetime


class BalanceOut(BaseModel):
    balance: float


@router.post("", response_model=TransactionOut, status_code=201)
async def create_transaction(
    payload: TransactionCreate,
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    # 403 before anything is written
    ensure_owner(payload.user_id, current_user_id)
    return await store.add_transaction(Transaction(**payload.model_dump()))


@router.get("", response_model=Page[TransactionOut])
async def list_transactions(
    user_id: str = Query(alias="userId"),
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    """Transaction history, newest first."""
    ensure_owner(user_id, current_user_id)
    rows = await store.list_transactions(user_id)
    # paginated in memory, ordering comes from the query
    return paginate([TransactionOut.model_validate(tx) for tx in rows])


@router.get("/balance", response_model=BalanceOut)
async def get_balance(
    user_id: str = Query(alias="userId"),
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    ensure_owner(user_id, current_user_id)
    return BalanceOut(balance=await reports.balance(store, user_id))
