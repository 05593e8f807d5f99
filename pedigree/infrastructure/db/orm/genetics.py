from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    Float,
    ForeignKey,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from pedigree.domain.value_objects.inheritance_pattern import (
    GenotypeTestMethod,
    InheritancePattern,
)
from pedigree.infrastructure.db.base import Base, enum_type


class GeneticTraitORM(Base):
    __tablename__ = "genetic_traits"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    inheritance_pattern: Mapped[InheritancePattern] = mapped_column(
        enum_type(InheritancePattern, "inheritance_pattern"), nullable=False
    )
    health_implications: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class AlleleORM(Base):
    __tablename__ = "alleles"
    __table_args__ = (UniqueConstraint("trait_id", "symbol", name="ux_alleles_trait_symbol"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    trait_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("genetic_traits.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    symbol: Mapped[str] = mapped_column(String(16), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    dominant: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class DogGenotypeORM(Base):
    __tablename__ = "dog_genotypes"
    __table_args__ = (
        UniqueConstraint("dog_id", "trait_id", name="ux_dog_genotypes_dog_trait"),
        CheckConstraint(
            "confidence IS NULL OR (confidence >= 0 AND confidence <= 1)",
            name="confidence_fraction",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    dog_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="CASCADE"), nullable=False, index=True
    )
    trait_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("genetic_traits.id", ondelete="CASCADE"), nullable=False
    )
    genotype: Mapped[str] = mapped_column(String(64), nullable=False)
    test_method: Mapped[GenotypeTestMethod | None] = mapped_column(
        enum_type(GenotypeTestMethod, "genotype_test_method"), nullable=True
    )
    test_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    confidence: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class BreedTraitPrevalenceORM(Base):
    __tablename__ = "breed_trait_prevalences"
    __table_args__ = (
        UniqueConstraint("breed", "trait_id", name="ux_breed_trait_prevalence"),
        CheckConstraint("frequency >= 0 AND frequency <= 1", name="frequency_fraction"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    breed: Mapped[str] = mapped_column(String(128), nullable=False)
    trait_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("genetic_traits.id", ondelete="CASCADE"), nullable=False
    )
    frequency: Mapped[float] = mapped_column(Float, nullable=False)
    study_reference: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class GeneticAnalysisORM(Base):
    __tablename__ = "genetic_analyses"
    __table_args__ = (
        CheckConstraint(
            "overall_compatibility >= 0 AND overall_compatibility <= 1",
            name="compatibility_fraction",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    breeding_pair_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("breeding_pairs.id", ondelete="SET NULL"), nullable=True
    )
    sire_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="CASCADE"), nullable=False
    )
    dam_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("dogs.id", ondelete="CASCADE"), nullable=False
    )
    overall_compatibility: Mapped[float] = mapped_column(Float, nullable=False)
    recommendations: Mapped[str | None] = mapped_column(Text, nullable=True)
    analysis_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class TraitPredictionORM(Base):
    __tablename__ = "trait_predictions"
    __table_args__ = (
        UniqueConstraint("analysis_id", "trait_id", name="ux_trait_predictions_analysis_trait"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    analysis_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("genetic_analyses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    trait_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("genetic_traits.id", ondelete="CASCADE"), nullable=False
    )
    possible_genotypes: Mapped[dict[str, float]] = mapped_column(JSON, nullable=False)
