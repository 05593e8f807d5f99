from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from pedigree.application.actor import Actor
from pedigree.application.use_cases.auth import (
    change_password,
    deactivate_user,
    get_me,
    list_users,
    login_user,
    register_user,
    update_user_role,
)
from pedigree.infrastructure.auth.context import AuthContext
from pedigree.infrastructure.auth.jwt_service import JWTService
from pedigree.infrastructure.auth.password import PasswordHasher
from pedigree.interfaces.http.deps import (
    get_actor,
    get_auth_context,
    get_client_ip,
    get_jwt_service,
    get_optional_actor,
    get_password_hasher,
    get_uow,
)
from pedigree.interfaces.http.schemas.auth import (
    ChangePasswordRequest,
    ChangePasswordResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    ResetPasswordRequest,
    UpdateRoleRequest,
    UserResponse,
)

router = APIRouter(prefix="", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/auth/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
    ip_address: str | None = Depends(get_client_ip),
) -> LoginResponse:
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email=payload.email, password=payload.password),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
        ip_address=ip_address,
    )
    logger.info("User %s logged in", result.user_id)
    return LoginResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        user_id=result.user_id,
        email=result.email,
        role=result.role,
    )


@router.post("/auth/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    requester: Actor | None = Depends(get_optional_actor),
) -> UserResponse:
    owner = (
        register_user.OwnerDetails(**payload.owner.model_dump()) if payload.owner else None
    )
    user = await register_user.execute(
        uow=uow,
        payload=register_user.RegisterUserInput(
            email=payload.email,
            password=payload.password,
            first_name=payload.first_name,
            last_name=payload.last_name,
            role=payload.role,
            owner=owner,
        ),
        password_hasher=password_hasher,
        requester=requester,
    )
    return UserResponse.model_validate(user)


@router.get("/me", response_model=UserResponse)
async def read_me(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> UserResponse:
    user = await get_me.execute(uow, context.user_id)
    return UserResponse.model_validate(user)


@router.patch("/users/{user_id}/role", response_model=UserResponse)
async def change_role(
    user_id: UUID,
    payload: UpdateRoleRequest,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> UserResponse:
    user = await update_user_role.execute(uow, actor, user_id, payload.role)
    return UserResponse.model_validate(user)


@router.post("/users/{user_id}/deactivate", response_model=UserResponse)
async def deactivate(
    user_id: UUID, actor: Actor = Depends(get_actor), uow=Depends(get_uow)
) -> UserResponse:
    user = await deactivate_user.execute(uow, actor, user_id)
    return UserResponse.model_validate(user)


@router.post("/auth/change-password", response_model=ChangePasswordResponse)
async def change_own_password(
    payload: ChangePasswordRequest,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> ChangePasswordResponse:
    await change_password.execute(
        uow=uow,
        actor=actor,
        payload=change_password.ChangePasswordInput(
            user_id=actor.user_id,
            current_password=payload.current_password,
            new_password=payload.new_password,
        ),
        password_hasher=password_hasher,
    )
    logger.info("User %s changed their password", actor.user_id)
    return ChangePasswordResponse(status="password_changed")


@router.post("/users/{user_id}/password", response_model=ChangePasswordResponse)
async def reset_password(
    user_id: UUID,
    payload: ResetPasswordRequest,
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> ChangePasswordResponse:
    await change_password.execute(
        uow=uow,
        actor=actor,
        payload=change_password.ChangePasswordInput(
            user_id=user_id, new_password=payload.new_password
        ),
        password_hasher=password_hasher,
    )
    return ChangePasswordResponse(status="password_changed")


@router.get("/users", response_model=list[UserResponse])
async def list_users_endpoint(
    role: str | None = Query(None),
    search: str | None = Query(None),
    include_inactive: bool = Query(True),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    actor: Actor = Depends(get_actor),
    uow=Depends(get_uow),
) -> list[UserResponse]:
    users = await list_users.execute(
        uow,
        actor,
        limit=limit,
        offset=offset,
        role=role,
        search=search,
        include_inactive=include_inactive,
    )
    return [UserResponse.model_validate(user) for user in users]
