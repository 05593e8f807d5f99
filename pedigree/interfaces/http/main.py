from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pedigree.config.logging_config import configure_logging
from pedigree.config.settings import Settings, get_settings
from pedigree.infrastructure.auth.jwt_service import JWTService
from pedigree.infrastructure.auth.password import PasswordHasher
from pedigree.infrastructure.db.session import create_engine, create_session_factory
from pedigree.interfaces.http.deps import get_app_settings
from pedigree.interfaces.http.routers import auth as auth_router
from pedigree.interfaces.http.routers import (
    breeding,
    breeds,
    dogs,
    events,
    genetics,
    litters,
    logs,
    owners,
)
from pedigree.interfaces.middleware.auth_middleware import AuthMiddleware
from pedigree.interfaces.middleware.error_handler import register_error_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def create_app(
    *,
    settings: Settings | None = None,
    password_hasher: PasswordHasher | None = None,
    jwt_service: JWTService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    app = FastAPI(
        title="Pedigree Registry Backend",
        version="0.1.0",
        description="Canine pedigree, breeding and ownership registry API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.password_hasher = password_hasher or PasswordHasher()
    app.state.jwt_service = jwt_service or JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        leeway_seconds=settings.jwt_leeway_seconds,
    )
    register_error_handlers(app)

    api = APIRouter(prefix="/api/v1")
    api.include_router(auth_router.router)
    api.include_router(dogs.router)
    api.include_router(breeds.router)
    api.include_router(owners.router)
    api.include_router(breeding.router)
    api.include_router(litters.router)
    api.include_router(events.router)
    api.include_router(genetics.router)
    api.include_router(logs.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:  # noqa: ANN001
        return {"status": "ok"}

    app.include_router(api)

    # Auth first, then CORS last so CORS runs outermost and answers preflight OPTIONS
    app.add_middleware(AuthMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
