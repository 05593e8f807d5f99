from __future__ import annotations

import logging
from collections.abc import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from pedigree.application.errors import AuthError, InvalidCredential
from pedigree.config.settings import Settings
from pedigree.infrastructure.auth.context import (
    AuthContext,
    authenticate,
    authenticate_optional,
)
from pedigree.infrastructure.db.session import SQLAlchemyUnitOfWork

logger = logging.getLogger(__name__)

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/health",
    "/api/v1/auth/login",
    "/api/v1/auth/register",
    "/docs",
    "/openapi.json",
    "/redoc",
)
# Read-only routes that serve anonymous callers and personalise for known ones
TOLERANT_READ_PREFIXES: Iterable[str] = ("/api/v1/dogs",)


def is_tolerant(method: str, path: str) -> bool:
    if any(path.startswith(prefix) for prefix in PUBLIC_PATHS):
        return True
    return method in ("GET", "HEAD") and any(
        path.startswith(prefix) for prefix in TOLERANT_READ_PREFIXES
    )


class AuthMiddleware(BaseHTTPMiddleware):
    """Attach an ``AuthContext`` to ``request.state`` for every request.

    Protected routes reject a missing or bad credential outright; tolerant
    routes fall back to an anonymous request. Nothing is kept between requests.
    """

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def _ensure_active(self, request: Request, context: AuthContext) -> None:
        session_factory = getattr(request.app.state, "session_factory", None)
        if session_factory is None:
            raise RuntimeError("Session factory not configured")
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            user = await uow.users.get(context.user_id)
        if not user or not user.is_active:
            raise InvalidCredential("Inactive or missing user")
        if user.role != context.role:
            raise InvalidCredential("Credential role is out of date")

    async def dispatch(self, request: Request, call_next) -> Response:
        request.state.auth_context = None
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)

        jwt_service = getattr(request.app.state, "jwt_service", None)
        if jwt_service is None:
            raise RuntimeError("JWT service not configured")
        authorization = request.headers.get("Authorization")

        if is_tolerant(request.method, request.url.path):
            context = authenticate_optional(authorization, jwt_service)
            if context is not None:
                try:
                    await self._ensure_active(request, context)
                except AuthError:
                    logger.debug("Dropping stale credential of user %s", context.user_id)
                    context = None
            request.state.auth_context = context
            return await call_next(request)

        try:
            context = authenticate(authorization, jwt_service)
            await self._ensure_active(request, context)
        except AuthError as exc:
            payload = {"code": exc.code, "message": exc.message}
            if exc.details is not None:
                payload["details"] = exc.details
            return JSONResponse(
                status_code=exc.status_code,
                content=payload,
                headers={"WWW-Authenticate": "Bearer"},
            )
        request.state.auth_context = context
        return await call_next(request)
