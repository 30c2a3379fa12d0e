"""ft_budget REST endpoints, all require JWT authentication."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_budget.application.schemas import CreateBudgetRequest, UpdateBudgetRequest
from src.ft_budget.application.service import BudgetApplicationService
from src.ft_common.database import get_db_session
from src.ft_common.response import ApiResponse, success_response
from src.ft_gateway.auth.dependencies import get_current_user
from src.ft_gateway.user.db_models import UserModel

router = APIRouter(prefix="/budgets", tags=["budgets"])

_service = BudgetApplicationService()


@router.get("")
async def list_budgets(
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.list_budgets(db, str(current_user.id))
    return success_response(result.model_dump(), request=request)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_budget(
    body: CreateBudgetRequest,
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.create_budget(
        db,
        str(current_user.id),
        body.category,
        body.amount_cents,
        body.start_date,
        body.end_date,
    )
    return success_response(result.model_dump(), message="Budget created", request=request)


@router.put("/{budget_id}")
async def update_budget(
    budget_id: uuid.UUID,
    body: UpdateBudgetRequest,
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.update_budget(
        db,
        str(current_user.id),
        str(budget_id),
        body.category,
        body.amount_cents,
        body.start_date,
        body.end_date,
    )
    return success_response(result.model_dump(), message="Budget updated", request=request)


@router.delete("/{budget_id}")
async def delete_budget(
    budget_id: uuid.UUID,
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    await _service.delete_budget(db, str(current_user.id), str(budget_id))
    return success_response(None, message="Budget deleted successfully", request=request)
