from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from pedigree.application.errors import AppError, InfrastructureError
from pedigree.domain.models.system_log import SystemLog
from pedigree.domain.value_objects.log_level import LogLevel
from pedigree.infrastructure.db.session import SQLAlchemyUnitOfWork

logger = logging.getLogger(__name__)


async def persist_system_log(request: Request, exc: Exception) -> None:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        return
    context = getattr(request.state, "auth_context", None)
    entry = SystemLog(
        level=LogLevel.ERROR,
        message=str(exc) or exc.__class__.__name__,
        source=f"{request.method} {request.url.path}",
        details={"exception": exc.__class__.__name__},
        stack_trace="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        ip_address=request.client.host if request.client else None,
        user_id=context.user_id if context else None,
    )
    try:
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            await uow.system_logs.add(entry)
            await uow.commit()
    except SQLAlchemyError:
        logger.exception("Failed to persist system log for %s", entry.source)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:  # noqa: WPS430
        logger.info(
            "Application error handled: %s - %s (status: %d)",
            exc.code,
            exc.message,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        payload = {"code": exc.code, "message": exc.message}
        if exc.details is not None:
            payload["details"] = exc.details
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content=payload, headers=headers)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:  # noqa: WPS430
        payload = {"code": "http_error", "message": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=payload)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:  # noqa: WPS430
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        await persist_system_log(request, exc)
        error = InfrastructureError("Unexpected server error")
        payload = {"code": error.code, "message": error.message}
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)
