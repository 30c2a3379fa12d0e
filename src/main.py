"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.ft_budget.api.router import router as budget_router
from src.ft_common.cache import open_cache
from src.ft_common.database import check_database, engine
from src.ft_common.errors import AppError
from src.ft_common.response import error_response
from src.ft_expense.api.router import router as expense_router
from src.ft_gateway.api.router import router as auth_router
from src.ft_gateway.middleware.request_log import RequestLogMiddleware
from src.ft_report.api.router import router as report_router

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: open the result cache, verify DB. Shutdown: dispose both.

    The cache's store connection is released by open_cache() even if the
    DB check below fails.
    """
    async with open_cache(settings.REDIS_URL, settings.CACHE_TTL_SECONDS) as cache:
        try:
            await check_database()
            app.state.cache = cache
            yield
        finally:
            app.state.cache = None
            await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=VERSION,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message, request=request)
    return JSONResponse(status_code=exc.http_status, content=resp.model_dump())


app.include_router(auth_router, prefix="/api/v1")
app.include_router(expense_router, prefix="/api/v1")
app.include_router(budget_router, prefix="/api/v1")
app.include_router(report_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": VERSION}
