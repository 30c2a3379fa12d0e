"""ApiResponse envelope shared by every endpoint and the AppError handler.

    {"code": 0, "message": "success", "data": ..., "timestamp": ..., "request_id": ...}

code 0 is success, any other value is an AppError code and data is null.
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field
from starlette.requests import Request


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


def request_id_of(request: Request) -> str:
    """The id RequestLogMiddleware stamped on this request, or a fresh one."""
    return getattr(request.state, "request_id", None) or new_request_id()


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    request_id: str = Field(default_factory=new_request_id)


def success_response(
    data: Any = None, message: str = "success", request: Request | None = None
) -> ApiResponse:
    resp = ApiResponse(code=0, message=message, data=data)
    if request is not None:
        resp.request_id = request_id_of(request)
    return resp


def error_response(code: int, message: str, request: Request | None = None) -> ApiResponse:
    resp = ApiResponse(code=code, message=message, data=None)
    if request is not None:
        resp.request_id = request_id_of(request)
    return resp
