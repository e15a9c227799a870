"""
Exception handlers shared by every router.

Outcomes:
- invalid request (body, path or query) -> 400 with pydantic error detail
- missing row -> 404, raised by routers as HTTPException
- database or unexpected failure -> 500 with the raw error message

Database errors are handled (and logged) here. Other exceptions reach
Starlette's ServerErrorMiddleware, which re-raises after responding, so the
server logs their traceback and this module does not.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def database_error_handler(request: Request, exc: asyncpg.PostgresError) -> PlainTextResponse:
    logger.exception(
        "database_error method=%s path=%s sqlstate=%s",
        request.method,
        request.url.path,
        getattr(exc, "sqlstate", None),
    )
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


async def server_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(asyncpg.PostgresError, database_error_handler)
    app.add_exception_handler(Exception, server_error_handler)
