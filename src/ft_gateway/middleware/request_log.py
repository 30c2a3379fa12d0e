"""Access log for every HTTP request on the "ft.request" logger.

    INFO    [GET] /api/v1/reports/monthly → 200 (4ms) req_a1b2c3d4e5f6
    WARNING [PUT] /api/v1/budgets/... → 400 (7ms) req_...
    ERROR   [GET] /api/v1/expenses → 503 (2ms) req_...

The id is stored on request.state before the handler runs (routers and the
AppError handler copy it into ApiResponse) and returned as X-Request-ID.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.ft_common.response import new_request_id

logger = logging.getLogger("ft.request")

REQUEST_ID_HEADER = "X-Request-ID"


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = new_request_id()
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        took_ms = (time.perf_counter() - started) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.log(
            _level_for(response.status_code),
            "[%s] %s → %d (%.0fms) %s",
            request.method,
            request.url.path,
            response.status_code,
            took_ms,
            request_id,
        )
        return response
