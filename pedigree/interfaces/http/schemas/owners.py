from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr

from pedigree.interfaces.http.schemas.dogs import DogResponse


class OwnerCreate(BaseModel):
    name: str
    contact_email: EmailStr | None = None
    contact_phone: str | None = None
    address: str | None = None
    is_breeder: bool = False


class OwnerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    contact_email: str | None = None
    contact_phone: str | None = None
    address: str | None = None
    is_breeder: bool
    created_at: datetime


class OwnershipCreate(BaseModel):
    owner_id: UUID
    dog_id: UUID
    start_date: date
    is_current: bool = True
    end_date: date | None = None
    transfer_document_url: str | None = None


class OwnershipResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    dog_id: UUID
    start_date: date
    end_date: date | None = None
    is_current: bool
    transfer_document_url: str | None = None


class TransferRequest(BaseModel):
    new_owner_id: UUID
    transfer_date: date | None = None
    from_owner_id: UUID | None = None
    transfer_document_url: str | None = None


class TransferResponse(BaseModel):
    previous: OwnershipResponse
    current: OwnershipResponse


class OwnedDogResponse(BaseModel):
    dog: DogResponse
    ownership: OwnershipResponse
