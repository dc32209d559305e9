from datetime import date as DateType

from fastapi import APIRouter, Depends
from fastapi_pagination import Page, paginate
from pydantic import Field

from fintrack.services.auth.utils import ensure_owner, get_current_user_id
from fintrack.services.database.models.finance.model import SavingsWalletEntry, TransactionType
from fintrack.services.database.store import SQLModelFinanceStore
from fintrack.services.deps import get_store
from fintrack.services.schema import CamelModel

router = APIRouter(prefix="/savingswallet", tags=["savings wallet"])


class WalletEntryCreate(CamelModel):
    user_id: str
    type: TransactionType
    amount: float = Field(gt=0)
    date: DateType


class WalletEntryOut(CamelModel):
    id: int
    user_id: str
    type: TransactionType
    amount: float
    date: DateType


@router.post("", response_model=WalletEntryOut, status_code=201)
async def add_wallet_entry(
    payload: WalletEntryCreate,
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    ensure_owner(payload.user_id, current_user_id)
    return await store.add_wallet_entry(SavingsWalletEntry(**payload.model_dump()))


@router.get("/{user_id}", response_model=Page[WalletEntryOut])
async def list_wallet_entries(
    user_id: str,
    store: SQLModelFinanceStore = Depends(get_store),
    current_user_id: str = Depends(get_current_user_id),
):
    ensure_owner(user_id, current_user_id)
    rows = await store.find_wallet_entries_by_user(user_id)
    return paginate([WalletEntryOut.model_validate(entry) for entry in rows])
