"""ft_expense REST endpoints, all require JWT authentication.

GET    /expenses               — caller's expenses (served through the result cache)
POST   /expenses               — create
PUT    /expenses/{expense_id}  — partial update
DELETE /expenses/{expense_id}  — delete
"""

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.ft_common.cache import ReadThroughCache, get_cache
from src.ft_common.database import get_db_session
from src.ft_common.response import ApiResponse, success_response
from src.ft_expense.application.schemas import CreateExpenseRequest, UpdateExpenseRequest
from src.ft_expense.application.service import ExpenseApplicationService
from src.ft_gateway.auth.dependencies import get_current_user
from src.ft_gateway.user.db_models import UserModel

router = APIRouter(prefix="/expenses", tags=["expenses"])

_service = ExpenseApplicationService()


@router.get("")
async def list_expenses(
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    cache: Annotated[ReadThroughCache, Depends(get_cache)],
) -> ApiResponse:
    result = await _service.list_expenses(db, cache, str(current_user.id))
    return success_response(result.model_dump(), request=request)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_expense(
    body: CreateExpenseRequest,
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.create_expense(
        db, str(current_user.id), body.description, body.amount_cents, body.spent_at
    )
    return success_response(result.model_dump(), message="Expense created", request=request)


@router.put("/{expense_id}")
async def update_expense(
    expense_id: uuid.UUID,
    body: UpdateExpenseRequest,
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.update_expense(
        db,
        str(current_user.id),
        str(expense_id),
        body.description,
        body.amount_cents,
        body.spent_at,
    )
    return success_response(result.model_dump(), message="Expense updated", request=request)


@router.delete("/{expense_id}")
async def delete_expense(
    expense_id: uuid.UUID,
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    await _service.delete_expense(db, str(current_user.id), str(expense_id))
    return success_response(None, message="Expense deleted successfully", request=request)
