from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from pedigree.domain.value_objects.breeding_record_status import BreedingRecordStatus
from pedigree.infrastructure.db.base import Base, enum_type


class BreedingRecordORM(Base):
    __tablename__ = "breeding_records"
    __table_args__ = (
        CheckConstraint("litter_size IS NULL OR litter_size >= 0", name="litter_size_positive"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    breeding_pair_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("breeding_pairs.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    breeding_date: Mapped[date] = mapped_column(Date, nullable=False)
    litter_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    status: Mapped[BreedingRecordStatus] = mapped_column(
        enum_type(BreedingRecordStatus, "breeding_record_status"),
        nullable=False,
        default=BreedingRecordStatus.PLANNED,
    )
    comments: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)


class BreedingRecordPuppyORM(Base):
    __tablename__ = "breeding_record_puppies"
    __table_args__ = (
        UniqueConstraint("breeding_record_id", "puppy_id", name="ux_breeding_record_puppy"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    breeding_record_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("breeding_records.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    puppy_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
