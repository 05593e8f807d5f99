from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class BreedCreate(BaseModel):
    name: str
    group: str | None = None
    origin: str | None = None
    description: str | None = None
    temperament: str | None = None
    average_lifespan: str | None = None
    average_height: str | None = None
    average_weight: str | None = None


class BreedUpdate(BaseModel):
    name: str | None = None
    group: str | None = None
    origin: str | None = None
    description: str | None = None
    temperament: str | None = None
    average_lifespan: str | None = None
    average_height: str | None = None
    average_weight: str | None = None


class BreedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    group: str | None = None
    origin: str | None = None
    description: str | None = None
    temperament: str | None = None
    average_lifespan: str | None = None
    average_height: str | None = None
    average_weight: str | None = None
    created_at: datetime
    updated_at: datetime
