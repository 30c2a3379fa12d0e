"""ft_report REST endpoints.

GET /reports/monthly — totals for the current month (cached per user)
GET /reports/yearly  — totals for the current year  (cached per user)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_common.cache import ReadThroughCache, get_cache
from src.ft_common.database import get_db_session
from src.ft_common.response import ApiResponse, success_response
from src.ft_gateway.auth.dependencies import get_current_user
from src.ft_gateway.user.db_models import UserModel
from src.ft_report.application.service import ReportApplicationService

router = APIRouter(prefix="/reports", tags=["reports"])

_service = ReportApplicationService()


@router.get("/monthly")
async def monthly_report(
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    cache: Annotated[ReadThroughCache, Depends(get_cache)],
) -> ApiResponse:
    result = await _service.monthly(db, cache, str(current_user.id))
    return success_response(result.model_dump(), request=request)


@router.get("/yearly")
async def yearly_report(
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    cache: Annotated[ReadThroughCache, Depends(get_cache)],
) -> ApiResponse:
    result = await _service.yearly(db, cache, str(current_user.id))
    return success_response(result.model_dump(), request=request)
