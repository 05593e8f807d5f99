"""add breeds registry, dogs.breed_id and unique active program-less pairs

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0002'
down_revision: Union[str, Sequence[str], None] = '0001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'breeds',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('group', sa.String(length=128), nullable=True),
        sa.Column('origin', sa.String(length=128), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('temperament', sa.Text(), nullable=True),
        sa.Column('average_lifespan', sa.String(length=64), nullable=True),
        sa.Column('average_height', sa.String(length=64), nullable=True),
        sa.Column('average_weight', sa.String(length=64), nullable=True),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False
        ),
        sa.Column(
            'updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False
        ),
        sa.PrimaryKeyConstraint('id', name='pk_breeds'),
        sa.UniqueConstraint('name', name='uq_breeds_name'),
    )

    # Free-text breed stays; the link is optional and filled in as breeds get registered
    op.add_column('dogs', sa.Column('breed_id', sa.Uuid(), nullable=True))
    op.create_index('ix_dogs_breed_id', 'dogs', ['breed_id'])
    op.create_foreign_key(
        'fk_dogs_breed_id_breeds', 'dogs', 'breeds', ['breed_id'], ['id'], ondelete='RESTRICT'
    )

    # NULL program ids never collide under ux_breeding_pairs_active
    op.create_index(
        'ux_breeding_pairs_active_unprogrammed',
        'breeding_pairs',
        ['sire_id', 'dam_id'],
        unique=True,
        postgresql_where=sa.text(
            "program_id IS NULL AND status NOT IN ('UNSUCCESSFUL', 'CANCELLED')"
        ),
    )


def downgrade() -> None:
    op.drop_index('ux_breeding_pairs_active_unprogrammed', table_name='breeding_pairs')
    op.drop_constraint('fk_dogs_breed_id_breeds', 'dogs', type_='foreignkey')
    op.drop_index('ix_dogs_breed_id', table_name='dogs')
    op.drop_column('dogs', 'breed_id')
    op.drop_table('breeds')
