"""FastAPI dependency: get_current_user.

Usage in any protected router:
    from src.ft_gateway.auth.dependencies import get_current_user

    @router.get("/protected")
    async def protected(user: UserModel = Depends(get_current_user)):
        ...
"""

import uuid

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_common.database import get_db_session
from src.ft_common.errors import AccountDisabledError, InvalidCredentialsError
from src.ft_gateway.auth.jwt_handler import verify_access_token
from src.ft_gateway.user.db_models import UserModel

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")

_CREDENTIALS_EXCEPTION = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Invalid or expired token",
    headers={"WWW-Authenticate": "Bearer"},
)


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db_session),
) -> UserModel:
    """Resolve the Bearer token to its UserModel.

    Raises HTTP 401 if the token is missing, invalid, expired, or names a
    user that no longer exists. Raises AccountDisabledError (403) for a
    disabled account.
    """
    try:
        user_id = uuid.UUID(verify_access_token(token))
    except (InvalidCredentialsError, ValueError):
        raise _CREDENTIALS_EXCEPTION from None

    result = await db.execute(select(UserModel).where(UserModel.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise _CREDENTIALS_EXCEPTION

    if not user.is_active:
        raise AccountDisabledError()

    return user
