from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from pydantic import BaseModel, EmailStr, Field
from sqlmodel.ext.asyncio.session import AsyncSession

from fintrack.services.auth.factory import AuthServiceFactory
from fintrack.services.auth.service import AuthService
from fintrack.services.auth.utils import get_hash_password, jwt_decode, password_verify
from fintrack.services.database.models.user.crud import create_user, get_user_by_email, get_user_by_id
from fintrack.services.database.models.user.model import User
from fintrack.services.deps import get_service, get_session
from fintrack.services.schema import CamelModel, ServiceType

router = APIRouter(prefix="/auth", tags=["auth"])


class RegisterPayload(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


class LoginPayload(BaseModel):
    email: EmailStr
    password: str


class UserOut(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str


class LoginResult(BaseModel):
    access: str  # short-lived bearer token
    refresh: str
    user: UserOut


class RefreshPayload(BaseModel):
    refresh: str


class AccessOnly(BaseModel):
    access: str


def get_auth_service() -> AuthService:
    return get_service(ServiceType.AUTH_SERVICE, AuthServiceFactory())  # type: ignore[return-value]


def login_result(user: User, auth: AuthService) -> LoginResult:
    tokens = auth.issue_tokens(user.id)
    return LoginResult(access=tokens["access"], refresh=tokens["refresh"], user=UserOut.model_validate(user))


@router.post("/register", response_model=LoginResult)
async def register(
    payload: RegisterPayload,
    db: AsyncSession = Depends(get_session),
    auth: AuthService = Depends(get_auth_service),
):
    if await get_user_by_email(db, payload.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    user = User(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        password=await get_hash_password(payload.password),
    )
    user = await create_user(db, user)
    logger.info(f"Registered user {user.id}")
    return login_result(user, auth)


@router.post("/login", response_model=LoginResult)
async def login(
    payload: LoginPayload,
    db: AsyncSession = Depends(get_session),
    auth: AuthService = Depends(get_auth_service),
):
    user = await get_user_by_email(db, payload.email)
    if not user or not await password_verify(payload.password, user.password):
        logger.info(f"Failed login for {payload.email}")
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return login_result(user, auth)


@router.post("/refresh", response_model=AccessOnly)
async def refresh_token(
    payload: RefreshPayload,
    db: AsyncSession = Depends(get_session),
    auth: AuthService = Depends(get_auth_service),
):
    user_id = jwt_decode(payload.refresh, token_type="refresh")
    if not user_id or not await get_user_by_id(db, user_id):
        raise HTTPException(status_code=401, detail="Invalid refresh token")
    return AccessOnly(access=auth.issue_access_token(user_id))
