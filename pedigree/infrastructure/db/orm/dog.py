from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from pedigree.domain.value_objects.approval_status import ApprovalStatus
from pedigree.domain.value_objects.gender import Gender
from pedigree.infrastructure.db.base import Base, enum_type
from pedigree.infrastructure.db.types import StringList


class DogORM(Base):
    __tablename__ = "dogs"
    __table_args__ = (
        CheckConstraint(
            "date_of_death IS NULL OR date_of_death >= date_of_birth", name="death_after_birth"
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    breed: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    breed_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("breeds.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    gender: Mapped[Gender] = mapped_column(enum_type(Gender, "gender"), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    date_of_death: Mapped[date | None] = mapped_column(Date, nullable=True)
    registration_number: Mapped[str | None] = mapped_column(String(64), nullable=True, unique=True)
    microchip_number: Mapped[str | None] = mapped_column(String(64), nullable=True)
    color: Mapped[str | None] = mapped_column(String(64), nullable=True)
    titles: Mapped[list[str]] = mapped_column(StringList, nullable=False, default=list)
    is_neutered: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    biography: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Deleting a parent keeps the offspring and forgets the link
    sire_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="SET NULL"), nullable=True, index=True
    )
    dam_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="SET NULL"), nullable=True, index=True
    )
    litter_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("litters.id", ondelete="SET NULL", use_alter=True),
        nullable=True,
        index=True,
    )

    approval_status: Mapped[ApprovalStatus] = mapped_column(
        enum_type(ApprovalStatus, "approval_status"),
        nullable=False,
        default=ApprovalStatus.PENDING,
    )
    approved_by: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    approval_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    approval_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_by: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
