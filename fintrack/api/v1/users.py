from fastapi import APIRouter, Depends, HTTPException
from sqlmodel.ext.asyncio.session import AsyncSession

from fintrack.api.v1.auth import UserOut
from fintrack.services.auth.utils import ensure_owner, get_current_user_id
from fintrack.services.database.models.user.crud import get_user_by_id
from fintrack.services.deps import get_session

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=UserOut)
async def get_user(
    user_id: str,
    db: AsyncSession = Depends(get_session),
    current_user_id: str = Depends(get_current_user_id),
):
    """Profile of the logged-in user."""
    ensure_owner(user_id, current_user_id)
    # a valid token can outlive its account
    user = await get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
