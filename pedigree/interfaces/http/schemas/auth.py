from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from pedigree.domain.value_objects.role import Role


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str
    user_id: UUID
    email: EmailStr
    role: Role


class OwnerDetailsSchema(BaseModel):
    name: str
    contact_phone: str | None = None
    address: str | None = None
    is_breeder: bool = False


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)
    first_name: str
    last_name: str
    role: str = Role.VIEWER.value
    owner: OwnerDetailsSchema | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: EmailStr
    first_name: str
    last_name: str
    role: Role
    is_active: bool
    last_login: datetime | None = None
    owner_id: UUID | None = None
    created_at: datetime


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str


class ResetPasswordRequest(BaseModel):
    new_password: str


class ChangePasswordResponse(BaseModel):
    status: str


class UpdateRoleRequest(BaseModel):
    role: str
