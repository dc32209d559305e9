from datetime import datetime, timedelta, timezone
from typing import Annotated, Optional

import jwt
from asgiref.sync import sync_to_async
from fastapi import HTTPException, Security
from fastapi.security import OAuth2PasswordBearer
from loguru import logger
from passlib.context import CryptContext

from fintrack.services.deps import get_settings_service

ALGORITHM = "HS256"
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_login = OAuth2PasswordBearer(tokenUrl="api/v1/auth/login", auto_error=False)


@sync_to_async
def get_hash_password(password: str) -> str:
    return pwd_context.hash(password)


@sync_to_async
def password_verify(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: timedelta) -> str:
    settings_service = get_settings_service()
    to_encode = data.copy()
    to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, settings_service.settings.jwt_secret, algorithm=ALGORITHM)


def jwt_decode(token: str, token_type: str = "access") -> Optional[str]:
    """Return the user id carried by a valid token of `token_type`, else None."""
    settings_service = get_settings_service()
    try:
        payload = jwt.decode(token, settings_service.settings.jwt_secret, algorithms=[ALGORITHM])
    except jwt.PyJWTError as exc:
        logger.debug(f"Rejected token: {exc}")
        return None
    if payload.get("type") != token_type:
        return None
    return payload.get("sub")


async def get_current_user_id(token: Annotated[Optional[str], Security(oauth2_login)]) -> str:
    """Resolve the caller from the bearer token alone. No store access happens here."""
    user_id = jwt_decode(token, token_type="access") if token else None
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authenticated", headers={"WWW-Authenticate": "Bearer"})
    return user_id


def ensure_owner(user_id: str, current_user_id: str) -> None:
    """The caller may only read or write records of the account it is logged in as."""
    if user_id != current_user_id:
        logger.warning(f"User {current_user_id} tried to access data of {user_id}")
        raise HTTPException(status_code=403, detail="Not allowed to access another user's data")
