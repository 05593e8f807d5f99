from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    Text,
    Uuid,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from pedigree.domain.value_objects.breeding_pair_status import BreedingPairStatus
from pedigree.infrastructure.db.base import Base, enum_type

_ACTIVE_PAIR = "status NOT IN ('UNSUCCESSFUL', 'CANCELLED')"
# NULL program ids never collide in a unique index, so program-less pairs get their own
_ACTIVE_UNPROGRAMMED_PAIR = f"program_id IS NULL AND {_ACTIVE_PAIR}"


class BreedingPairORM(Base):
    __tablename__ = "breeding_pairs"
    __table_args__ = (
        CheckConstraint(
            "genetic_compatibility_score IS NULL OR "
            "(genetic_compatibility_score >= 0 AND genetic_compatibility_score <= 1)",
            name="score_fraction",
        ),
        CheckConstraint("sire_id <> dam_id", name="distinct_parents"),
        Index(
            "ux_breeding_pairs_active",
            "sire_id",
            "dam_id",
            "program_id",
            unique=True,
            postgresql_where=text(_ACTIVE_PAIR),
            sqlite_where=text(_ACTIVE_PAIR),
        ),
        Index(
            "ux_breeding_pairs_active_unprogrammed",
            "sire_id",
            "dam_id",
            unique=True,
            postgresql_where=text(_ACTIVE_UNPROGRAMMED_PAIR),
            sqlite_where=text(_ACTIVE_UNPROGRAMMED_PAIR),
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    program_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("breeding_programs.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    sire_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    dam_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    planned_breeding_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    compatibility_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    genetic_compatibility_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    status: Mapped[BreedingPairStatus] = mapped_column(
        enum_type(BreedingPairStatus, "breeding_pair_status"),
        nullable=False,
        default=BreedingPairStatus.PLANNED,
    )
    status_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
