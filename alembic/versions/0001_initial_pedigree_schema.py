"""initial pedigree registry schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True, length=32)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    # --- owners / users ---
    op.create_table(
        'owners',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('contact_email', sa.String(length=255), nullable=True),
        sa.Column('contact_phone', sa.String(length=64), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('is_breeder', sa.Boolean(), server_default='false', nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='pk_owners'),
    )
    op.create_index('ix_owners_contact_email', 'owners', ['contact_email'])

    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('first_name', sa.String(length=128), nullable=False),
        sa.Column('last_name', sa.String(length=128), nullable=False),
        sa.Column('role', _enum('role', 'ADMIN', 'OWNER', 'HANDLER', 'CLUB', 'VIEWER'), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default='true', nullable=False),
        sa.Column('last_login', sa.DateTime(timezone=True), nullable=True),
        sa.Column('owner_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['owner_id'], ['owners.id'], name='fk_users_owner_id_owners', ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    # --- dogs (litter_id FK is added once litters exists) ---
    op.create_table(
        'dogs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('breed', sa.String(length=128), nullable=False),
        sa.Column('gender', _enum('gender', 'MALE', 'FEMALE'), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('date_of_death', sa.Date(), nullable=True),
        sa.Column('registration_number', sa.String(length=64), nullable=True),
        sa.Column('microchip_number', sa.String(length=64), nullable=True),
        sa.Column('color', sa.String(length=64), nullable=True),
        sa.Column('titles', sa.ARRAY(sa.String()), server_default='{}', nullable=False),
        sa.Column('is_neutered', sa.Boolean(), server_default='false', nullable=False),
        sa.Column('biography', sa.Text(), nullable=True),
        sa.Column('sire_id', sa.Uuid(), nullable=True),
        sa.Column('dam_id', sa.Uuid(), nullable=True),
        sa.Column('litter_id', sa.Uuid(), nullable=True),
        sa.Column(
            'approval_status',
            _enum('approval_status', 'PENDING', 'APPROVED', 'DECLINED'),
            server_default='PENDING',
            nullable=False,
        ),
        sa.Column('approved_by', sa.Uuid(), nullable=True),
        sa.Column('approval_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('approval_notes', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), server_default='1', nullable=False),
        sa.CheckConstraint(
            'date_of_death IS NULL OR date_of_death >= date_of_birth',
            name='ck_dogs_death_after_birth',
        ),
        sa.ForeignKeyConstraint(['sire_id'], ['dogs.id'], name='fk_dogs_sire_id_dogs', ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['dam_id'], ['dogs.id'], name='fk_dogs_dam_id_dogs', ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['approved_by'], ['users.id'], name='fk_dogs_approved_by_users', ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], name='fk_dogs_created_by_users', ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id', name='pk_dogs'),
        sa.UniqueConstraint('registration_number', name='uq_dogs_registration_number'),
    )
    op.create_index('ix_dogs_breed', 'dogs', ['breed'])
    op.create_index('ix_dogs_sire_id', 'dogs', ['sire_id'])
    op.create_index('ix_dogs_dam_id', 'dogs', ['dam_id'])
    op.create_index('ix_dogs_litter_id', 'dogs', ['litter_id'])

    op.create_table(
        'ownerships',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.Column('dog_id', sa.Uuid(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('is_current', sa.Boolean(), server_default='true', nullable=False),
        sa.Column('transfer_document_url', sa.String(length=1024), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('end_date IS NULL OR NOT is_current', name='ck_ownerships_closed_not_current'),
        sa.CheckConstraint('end_date IS NULL OR end_date >= start_date', name='ck_ownerships_end_after_start'),
        sa.ForeignKeyConstraint(['owner_id'], ['owners.id'], name='fk_ownerships_owner_id_owners', ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['dog_id'], ['dogs.id'], name='fk_ownerships_dog_id_dogs', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_ownerships'),
    )
    op.create_index('ix_ownerships_owner_id', 'ownerships', ['owner_id'])
    op.create_index('ix_ownerships_dog_id', 'ownerships', ['dog_id'])
    op.create_index(
        'ux_ownerships_current_dog',
        'ownerships',
        ['dog_id'],
        unique=True,
        postgresql_where=sa.text('is_current'),
    )

    # --- breeding ---
    op.create_table(
        'breeding_programs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('goals', sa.ARRAY(sa.String()), server_default='{}', nullable=False),
        sa.Column('breed', sa.String(length=128), nullable=False),
        sa.Column('breeder_id', sa.Uuid(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default='true', nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['breeder_id'], ['owners.id'],
            name='fk_breeding_programs_breeder_id_owners',
            ondelete='RESTRICT',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_breeding_programs'),
    )
    op.create_index('ix_breeding_programs_breeder_id', 'breeding_programs', ['breeder_id'])

    op.create_table(
        'breeding_program_foundation_dogs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('program_id', sa.Uuid(), nullable=False),
        sa.Column('dog_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ['program_id'], ['breeding_programs.id'],
            name='fk_breeding_program_foundation_dogs_program_id_breeding_programs',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['dog_id'], ['dogs.id'],
            name='fk_breeding_program_foundation_dogs_dog_id_dogs',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_breeding_program_foundation_dogs'),
        sa.UniqueConstraint('program_id', 'dog_id', name='ux_program_foundation_dog'),
    )

    op.create_table(
        'breeding_pairs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('program_id', sa.Uuid(), nullable=True),
        sa.Column('sire_id', sa.Uuid(), nullable=False),
        sa.Column('dam_id', sa.Uuid(), nullable=False),
        sa.Column('planned_breeding_date', sa.Date(), nullable=True),
        sa.Column('compatibility_notes', sa.Text(), nullable=True),
        sa.Column('genetic_compatibility_score', sa.Float(), nullable=True),
        sa.Column(
            'status',
            _enum(
                'breeding_pair_status',
                'PLANNED', 'APPROVED', 'PENDING_TESTING', 'BREEDING_SCHEDULED',
                'BRED', 'UNSUCCESSFUL', 'CANCELLED',
            ),
            server_default='PLANNED',
            nullable=False,
        ),
        sa.Column('status_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), server_default='1', nullable=False),
        sa.CheckConstraint(
            'genetic_compatibility_score IS NULL OR '
            '(genetic_compatibility_score >= 0 AND genetic_compatibility_score <= 1)',
            name='ck_breeding_pairs_score_fraction',
        ),
        sa.CheckConstraint('sire_id <> dam_id', name='ck_breeding_pairs_distinct_parents'),
        sa.ForeignKeyConstraint(
            ['program_id'], ['breeding_programs.id'],
            name='fk_breeding_pairs_program_id_breeding_programs',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(['sire_id'], ['dogs.id'], name='fk_breeding_pairs_sire_id_dogs', ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['dam_id'], ['dogs.id'], name='fk_breeding_pairs_dam_id_dogs', ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id', name='pk_breeding_pairs'),
    )
    op.create_index('ix_breeding_pairs_program_id', 'breeding_pairs', ['program_id'])
    op.create_index('ix_breeding_pairs_sire_id', 'breeding_pairs', ['sire_id'])
    op.create_index('ix_breeding_pairs_dam_id', 'breeding_pairs', ['dam_id'])
    op.create_index(
        'ux_breeding_pairs_active',
        'breeding_pairs',
        ['sire_id', 'dam_id', 'program_id'],
        unique=True,
        postgresql_where=sa.text("status NOT IN ('UNSUCCESSFUL', 'CANCELLED')"),
    )

    op.create_table(
        'breeding_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('breeding_pair_id', sa.Uuid(), nullable=False),
        sa.Column('breeding_date', sa.Date(), nullable=False),
        sa.Column('litter_size', sa.Integer(), nullable=True),
        sa.Column(
            'status',
            _enum(
                'breeding_record_status',
                'PLANNED', 'IN_PROGRESS', 'COMPLETED', 'FAILED', 'ABORTED',
            ),
            server_default='PLANNED',
            nullable=False,
        ),
        sa.Column('comments', sa.Text(), nullable=True),
        *_timestamps(),
        sa.Column('version', sa.Integer(), server_default='1', nullable=False),
        sa.CheckConstraint(
            'litter_size IS NULL OR litter_size >= 0',
            name='ck_breeding_records_litter_size_positive',
        ),
        sa.ForeignKeyConstraint(
            ['breeding_pair_id'], ['breeding_pairs.id'],
            name='fk_breeding_records_breeding_pair_id_breeding_pairs',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_breeding_records'),
    )
    op.create_index('ix_breeding_records_breeding_pair_id', 'breeding_records', ['breeding_pair_id'])

    op.create_table(
        'breeding_record_puppies',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('breeding_record_id', sa.Uuid(), nullable=False),
        sa.Column('puppy_id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(
            ['breeding_record_id'], ['breeding_records.id'],
            name='fk_breeding_record_puppies_breeding_record_id_breeding_records',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['puppy_id'], ['dogs.id'],
            name='fk_breeding_record_puppies_puppy_id_dogs',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_breeding_record_puppies'),
        sa.UniqueConstraint('breeding_record_id', 'puppy_id', name='ux_breeding_record_puppy'),
    )
    op.create_index(
        'ix_breeding_record_puppies_breeding_record_id',
        'breeding_record_puppies',
        ['breeding_record_id'],
    )
    op.create_index('ix_breeding_record_puppies_puppy_id', 'breeding_record_puppies', ['puppy_id'])

    # --- litters ---
    op.create_table(
        'litters',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('litter_name', sa.String(length=255), nullable=False),
        sa.Column('registration_number', sa.String(length=64), nullable=True),
        sa.Column('breeding_record_id', sa.Uuid(), nullable=True),
        sa.Column('sire_id', sa.Uuid(), nullable=False),
        sa.Column('dam_id', sa.Uuid(), nullable=False),
        sa.Column('whelping_date', sa.Date(), nullable=False),
        sa.Column('total_puppies', sa.Integer(), server_default='0', nullable=False),
        sa.Column('male_puppies', sa.Integer(), nullable=True),
        sa.Column('female_puppies', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('total_puppies >= 0', name='ck_litters_total_non_negative'),
        sa.CheckConstraint(
            '(male_puppies IS NULL OR male_puppies >= 0) AND '
            '(female_puppies IS NULL OR female_puppies >= 0)',
            name='ck_litters_counts_non_negative',
        ),
        sa.CheckConstraint(
            'male_puppies IS NULL OR female_puppies IS NULL '
            'OR total_puppies = male_puppies + female_puppies',
            name='ck_litters_puppy_counts_sum',
        ),
        sa.ForeignKeyConstraint(
            ['breeding_record_id'], ['breeding_records.id'],
            name='fk_litters_breeding_record_id_breeding_records',
            ondelete='SET NULL',
        ),
        sa.ForeignKeyConstraint(['sire_id'], ['dogs.id'], name='fk_litters_sire_id_dogs', ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['dam_id'], ['dogs.id'], name='fk_litters_dam_id_dogs', ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id', name='pk_litters'),
        sa.UniqueConstraint('registration_number', name='uq_litters_registration_number'),
    )
    op.create_index('ix_litters_breeding_record_id', 'litters', ['breeding_record_id'])
    op.create_index('ix_litters_sire_id', 'litters', ['sire_id'])
    op.create_index('ix_litters_dam_id', 'litters', ['dam_id'])
    op.create_foreign_key(
        'fk_dogs_litter_id_litters', 'dogs', 'litters', ['litter_id'], ['id'], ondelete='SET NULL'
    )

    # --- health and competitions ---
    op.create_table(
        'health_records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('dog_id', sa.Uuid(), nullable=False),
        sa.Column('record_date', sa.Date(), nullable=False),
        sa.Column(
            'type',
            _enum(
                'health_record_type',
                'VACCINATION', 'EXAMINATION', 'TREATMENT', 'SURGERY', 'TEST', 'OTHER',
            ),
            nullable=False,
        ),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('results', sa.Text(), nullable=True),
        sa.Column('veterinarian_name', sa.String(length=255), nullable=True),
        sa.Column('clinic_name', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['dog_id'], ['dogs.id'], name='fk_health_records_dog_id_dogs', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_health_records'),
    )
    op.create_index('ix_health_records_dog_id', 'health_records', ['dog_id'])

    op.create_table(
        'competition_results',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('dog_id', sa.Uuid(), nullable=False),
        sa.Column('competition_name', sa.String(length=255), nullable=False),
        sa.Column('competition_date', sa.Date(), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('rank', sa.Integer(), nullable=True),
        sa.Column('score', sa.Float(), nullable=True),
        sa.Column('title_earned', sa.String(length=128), nullable=True),
        sa.Column('judge', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('rank IS NULL OR rank >= 1', name='ck_competition_results_rank_positive'),
        sa.ForeignKeyConstraint(
            ['dog_id'], ['dogs.id'], name='fk_competition_results_dog_id_dogs', ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_competition_results'),
    )
    op.create_index('ix_competition_results_dog_id', 'competition_results', ['dog_id'])

    # --- clubs and events ---
    op.create_table(
        'clubs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('established_date', sa.Date(), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('contact_email', sa.String(length=255), nullable=True),
        sa.Column('website_url', sa.String(length=1024), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_clubs'),
        sa.UniqueConstraint('name', name='uq_clubs_name'),
    )

    op.create_table(
        'events',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column(
            'event_type',
            _enum(
                'event_type',
                'SHOW', 'COMPETITION', 'SEMINAR', 'TRAINING', 'MEETING', 'SOCIAL', 'OTHER',
            ),
            nullable=False,
        ),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('organizer', sa.String(length=255), nullable=False),
        sa.Column('club_id', sa.Uuid(), nullable=True),
        sa.Column('registration_deadline', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_published', sa.Boolean(), server_default='false', nullable=False),
        *_timestamps(),
        sa.CheckConstraint('end_date >= start_date', name='ck_events_ends_after_start'),
        sa.ForeignKeyConstraint(['club_id'], ['clubs.id'], name='fk_events_club_id_clubs', ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id', name='pk_events'),
    )
    op.create_index('ix_events_club_id', 'events', ['club_id'])

    op.create_table(
        'event_registrations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('event_id', sa.Uuid(), nullable=False),
        sa.Column('dog_id', sa.Uuid(), nullable=False),
        sa.Column('registration_date', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(
            ['event_id'], ['events.id'], name='fk_event_registrations_event_id_events', ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(
            ['dog_id'], ['dogs.id'], name='fk_event_registrations_dog_id_dogs', ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_event_registrations'),
        sa.UniqueConstraint('event_id', 'dog_id', name='ux_event_registration_dog'),
    )
    op.create_index('ix_event_registrations_event_id', 'event_registrations', ['event_id'])
    op.create_index('ix_event_registrations_dog_id', 'event_registrations', ['dog_id'])

    # --- genetics ---
    op.create_table(
        'genetic_traits',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column(
            'inheritance_pattern',
            _enum(
                'inheritance_pattern',
                'AUTOSOMAL_DOMINANT', 'AUTOSOMAL_RECESSIVE', 'X_LINKED_DOMINANT',
                'X_LINKED_RECESSIVE', 'POLYGENIC', 'CODOMINANT', 'INCOMPLETE_DOMINANCE',
                'EPISTASIS',
            ),
            nullable=False,
        ),
        sa.Column('health_implications', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_genetic_traits'),
        sa.UniqueConstraint('name', name='uq_genetic_traits_name'),
    )

    op.create_table(
        'alleles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('trait_id', sa.Uuid(), nullable=False),
        sa.Column('symbol', sa.String(length=16), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('dominant', sa.Boolean(), server_default='false', nullable=False),
        sa.ForeignKeyConstraint(
            ['trait_id'], ['genetic_traits.id'], name='fk_alleles_trait_id_genetic_traits', ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_alleles'),
        sa.UniqueConstraint('trait_id', 'symbol', name='ux_alleles_trait_symbol'),
    )
    op.create_index('ix_alleles_trait_id', 'alleles', ['trait_id'])

    op.create_table(
        'dog_genotypes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('dog_id', sa.Uuid(), nullable=False),
        sa.Column('trait_id', sa.Uuid(), nullable=False),
        sa.Column('genotype', sa.String(length=64), nullable=False),
        sa.Column(
            'test_method',
            _enum(
                'genotype_test_method',
                'DNA_TEST', 'PEDIGREE_ANALYSIS', 'PHENOTYPE_EXAMINATION',
                'CARRIER_TESTING', 'LINKAGE_TESTING',
            ),
            nullable=True,
        ),
        sa.Column('test_date', sa.Date(), nullable=True),
        sa.Column('confidence', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint(
            'confidence IS NULL OR (confidence >= 0 AND confidence <= 1)',
            name='ck_dog_genotypes_confidence_fraction',
        ),
        sa.ForeignKeyConstraint(['dog_id'], ['dogs.id'], name='fk_dog_genotypes_dog_id_dogs', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(
            ['trait_id'], ['genetic_traits.id'],
            name='fk_dog_genotypes_trait_id_genetic_traits',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_dog_genotypes'),
        sa.UniqueConstraint('dog_id', 'trait_id', name='ux_dog_genotypes_dog_trait'),
    )
    op.create_index('ix_dog_genotypes_dog_id', 'dog_genotypes', ['dog_id'])

    op.create_table(
        'breed_trait_prevalences',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('breed', sa.String(length=128), nullable=False),
        sa.Column('trait_id', sa.Uuid(), nullable=False),
        sa.Column('frequency', sa.Float(), nullable=False),
        sa.Column('study_reference', sa.Text(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint(
            'frequency >= 0 AND frequency <= 1',
            name='ck_breed_trait_prevalences_frequency_fraction',
        ),
        sa.ForeignKeyConstraint(
            ['trait_id'], ['genetic_traits.id'],
            name='fk_breed_trait_prevalences_trait_id_genetic_traits',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_breed_trait_prevalences'),
        sa.UniqueConstraint('breed', 'trait_id', name='ux_breed_trait_prevalence'),
    )

    op.create_table(
        'genetic_analyses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('breeding_pair_id', sa.Uuid(), nullable=True),
        sa.Column('sire_id', sa.Uuid(), nullable=False),
        sa.Column('dam_id', sa.Uuid(), nullable=False),
        sa.Column('overall_compatibility', sa.Float(), nullable=False),
        sa.Column('recommendations', sa.Text(), nullable=True),
        sa.Column('analysis_date', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint(
            'overall_compatibility >= 0 AND overall_compatibility <= 1',
            name='ck_genetic_analyses_compatibility_fraction',
        ),
        sa.ForeignKeyConstraint(
            ['breeding_pair_id'], ['breeding_pairs.id'],
            name='fk_genetic_analyses_breeding_pair_id_breeding_pairs',
            ondelete='SET NULL',
        ),
        sa.ForeignKeyConstraint(['sire_id'], ['dogs.id'], name='fk_genetic_analyses_sire_id_dogs', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['dam_id'], ['dogs.id'], name='fk_genetic_analyses_dam_id_dogs', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name='pk_genetic_analyses'),
    )

    op.create_table(
        'trait_predictions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('analysis_id', sa.Uuid(), nullable=False),
        sa.Column('trait_id', sa.Uuid(), nullable=False),
        sa.Column('possible_genotypes', sa.JSON(), nullable=False),
        sa.ForeignKeyConstraint(
            ['analysis_id'], ['genetic_analyses.id'],
            name='fk_trait_predictions_analysis_id_genetic_analyses',
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(
            ['trait_id'], ['genetic_traits.id'],
            name='fk_trait_predictions_trait_id_genetic_traits',
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name='pk_trait_predictions'),
        sa.UniqueConstraint('analysis_id', 'trait_id', name='ux_trait_predictions_analysis_trait'),
    )
    op.create_index('ix_trait_predictions_analysis_id', 'trait_predictions', ['analysis_id'])

    # --- audit and system logs (no foreign keys; rows outlive what they describe) ---
    op.create_table(
        'audit_logs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column(
            'action',
            _enum(
                'audit_action',
                'CREATE', 'READ', 'UPDATE', 'DELETE', 'LOGIN', 'LOGOUT', 'EXPORT',
                'IMPORT', 'TRANSFER_OWNERSHIP', 'APPROVE', 'REJECT',
            ),
            nullable=False,
        ),
        sa.Column('entity_type', sa.String(length=64), nullable=False),
        sa.Column('entity_id', sa.String(length=64), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=True),
        sa.Column('previous_state', sa.Text(), nullable=True),
        sa.Column('new_state', sa.Text(), nullable=True),
        sa.Column('ip_address', sa.String(length=64), nullable=True),
        sa.Column('metadata', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_audit_logs'),
    )
    op.create_index('ix_audit_logs_timestamp', 'audit_logs', ['timestamp'])
    op.create_index('ix_audit_logs_user_id', 'audit_logs', ['user_id'])
    op.create_index('ix_audit_logs_entity', 'audit_logs', ['entity_type', 'entity_id'])

    op.create_table(
        'system_logs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column(
            'level',
            _enum('log_level', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'),
            nullable=False,
        ),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('source', sa.String(length=255), nullable=False),
        sa.Column('details', sa.JSON(), nullable=True),
        sa.Column('stack_trace', sa.Text(), nullable=True),
        sa.Column('ip_address', sa.String(length=64), nullable=True),
        sa.Column('user_id', sa.Uuid(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_system_logs'),
    )
    op.create_index('ix_system_logs_timestamp', 'system_logs', ['timestamp'])


def downgrade() -> None:
    op.drop_table('system_logs')
    op.drop_table('audit_logs')
    op.drop_table('trait_predictions')
    op.drop_table('genetic_analyses')
    op.drop_table('breed_trait_prevalences')
    op.drop_table('dog_genotypes')
    op.drop_table('alleles')
    op.drop_table('genetic_traits')
    op.drop_table('event_registrations')
    op.drop_table('events')
    op.drop_table('clubs')
    op.drop_table('competition_results')
    op.drop_table('health_records')
    op.drop_constraint('fk_dogs_litter_id_litters', 'dogs', type_='foreignkey')
    op.drop_table('litters')
    op.drop_table('breeding_record_puppies')
    op.drop_table('breeding_records')
    op.drop_table('breeding_pairs')
    op.drop_table('breeding_program_foundation_dogs')
    op.drop_table('breeding_programs')
    op.drop_table('ownerships')
    op.drop_table('dogs')
    op.drop_table('users')
    op.drop_table('owners')
