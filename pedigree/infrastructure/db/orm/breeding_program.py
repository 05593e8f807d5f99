from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from pedigree.infrastructure.db.base import Base
from pedigree.infrastructure.db.types import StringList


class BreedingProgramORM(Base):
    __tablename__ = "breeding_programs"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    goals: Mapped[list[str]] = mapped_column(StringList, nullable=False, default=list)
    breed: Mapped[str] = mapped_column(String(128), nullable=False)
    breeder_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("owners.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class BreedingProgramFoundationDogORM(Base):
    __tablename__ = "breeding_program_foundation_dogs"
    __table_args__ = (
        UniqueConstraint("program_id", "dog_id", name="ux_program_foundation_dog"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    program_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("breeding_programs.id", ondelete="CASCADE"), nullable=False
    )
    dog_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="CASCADE"), nullable=False
    )
