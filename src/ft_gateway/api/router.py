"""Auth endpoints. These are the only routes that do not require a bearer token.

POST /auth/register  {username, email, password}  → 201 user info
POST /auth/login     {email, password}             → access + refresh token
POST /auth/refresh   {refresh_token}               → new access token
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.ft_common.database import get_db_session
from src.ft_common.response import ApiResponse, success_response
from src.ft_gateway.user.schemas import (
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    RegisterResponse,
    UserInfo,
)
from src.ft_gateway.user.service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])
_service = UserService()


def _access_ttl_seconds() -> int:
    return settings.JWT_EXPIRE_MINUTES * 60


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    async with db.begin():
        user = await _service.register(body.username, body.email, body.password, db)
    return success_response(
        RegisterResponse.from_user(user).model_dump(),
        message="User registered successfully",
        request=request,
    )


@router.post("/login")
async def login(
    body: LoginRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    user, access, refresh = await _service.login(body.email, body.password, db)
    data = LoginResponse(
        access_token=access,
        refresh_token=refresh,
        expires_in=_access_ttl_seconds(),
        user=UserInfo.from_user(user),
    )
    return success_response(data.model_dump(), message="Login successful", request=request)


@router.post("/refresh")
async def refresh_token(body: RefreshRequest, request: Request) -> ApiResponse:
    access = await _service.refresh(body.refresh_token)
    data = RefreshResponse(access_token=access, expires_in=_access_ttl_seconds())
    return success_response(data.model_dump(), message="Token refreshed", request=request)
