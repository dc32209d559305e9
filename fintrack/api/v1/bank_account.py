from datetime import date as DateType

from fastapi import APIRouter, Depends, Query
from fastapi_pagination import Page, paginate
from pydantic import BaseModel, Field

from fintrack.services.auth.utils import ensure_owner, get_current_user_id
from fintrack.services.database.models.finance.model import BankAccountTransaction, TransactionType
from fintrack.services.database.store import SQLModelFinanceStore
from fintrack.services.deps import get_store
from fintrack.services.schema import CamelModel

router = APIRouter(prefix="/bank-account", tags=["bank account"])


class StatementLine(CamelModel):
    date: DateType
    amount: float = Field(gt=0)
    description: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=50)
    type: TransactionType


class StatementImport(CamelModel):
    user_id: str
    transactions: list[StatementLine] = Field(min_length=1)


class StatementLineOut(StatementLine):
    id: int
    user_id: str


class ImportResult(BaseModel):
    inserted: int


@router.post("/transactions", response_model=ImportResult, status_code=201)
async def import_statement(
    payload: StatementImport,
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    """Store every line of an uploaded bank statement; the whole request is validated first."""
    ensure_owner(payload.user_id, current_user_id)
    # the owner comes from the envelope, not from each line
    rows = [BankAccountTransaction(user_id=payload.user_id, **line.model_dump()) for line in payload.transactions]
    return ImportResult(inserted=await store.add_bank_account_transactions(rows))


@router.get("/transactions", response_model=Page[StatementLineOut])
async def list_statement_lines(
    user_id: str = Query(alias="userId"),
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    ensure_owner(user_id, current_user_id)
    rows = await store.find_bank_account_transactions_by_user(user_id)
    return paginate([StatementLineOut.model_validate(row) for row in rows])
