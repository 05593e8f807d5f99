from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request

from pedigree.application.actor import Actor
from pedigree.application.errors import Unauthenticated
from pedigree.config.settings import Settings
from pedigree.infrastructure.auth.context import AuthContext
from pedigree.infrastructure.auth.jwt_service import JWTService
from pedigree.infrastructure.auth.password import PasswordHasher
from pedigree.infrastructure.db.session import SQLAlchemyUnitOfWork


def get_optional_auth_context(request: Request) -> AuthContext | None:
    return getattr(request.state, "auth_context", None)


def get_auth_context(
    context: AuthContext | None = Depends(get_optional_auth_context),
) -> AuthContext:
    if context is None:
        raise Unauthenticated("Authentication required")
    return context


def _client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


def get_actor(request: Request, context: AuthContext = Depends(get_auth_context)) -> Actor:
    return context.actor(_client_ip(request))


def get_optional_actor(
    request: Request, context: AuthContext | None = Depends(get_optional_auth_context)
) -> Actor | None:
    return context.actor(_client_ip(request)) if context else None


def get_client_ip(request: Request) -> str | None:
    return _client_ip(request)


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise RuntimeError("Settings not configured")
    return settings


def get_password_hasher(request: Request) -> PasswordHasher:
    hasher = getattr(request.app.state, "password_hasher", None)
    if hasher is None:
        raise RuntimeError("Password hasher not configured")
    return hasher


def get_jwt_service(request: Request) -> JWTService:
    service = getattr(request.app.state, "jwt_service", None)
    if service is None:
        raise RuntimeError("JWT service not configured")
    return service
