from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
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

from pedigree.infrastructure.db.base import Base


class LitterORM(Base):
    __tablename__ = "litters"
    __table_args__ = (
        CheckConstraint("total_puppies >= 0", name="total_non_negative"),
        CheckConstraint(
            "(male_puppies IS NULL OR male_puppies >= 0) AND "
            "(female_puppies IS NULL OR female_puppies >= 0)",
            name="counts_non_negative",
        ),
        CheckConstraint(
            "male_puppies IS NULL OR female_puppies IS NULL "
            "OR total_puppies = male_puppies + female_puppies",
            name="puppy_counts_sum",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    litter_name: Mapped[str] = mapped_column(String(255), nullable=False)
    registration_number: Mapped[str | None] = mapped_column(String(64), nullable=True, unique=True)
    breeding_record_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("breeding_records.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    sire_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    dam_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    whelping_date: Mapped[date] = mapped_column(Date, nullable=False)
    total_puppies: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    male_puppies: Mapped[int | None] = mapped_column(Integer, nullable=True)
    female_puppies: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
