"""Add swimming_practices table

Revision ID: 001
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create swimming_practices table."""
    op.create_table('swimming_practices', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('distance_meters', sa.Float(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.CheckConstraint('duration_minutes > 0', name='ck_swimming_practices_duration_positive'),
        sa.CheckConstraint('distance_meters > 0', name='ck_swimming_practices_distance_positive'),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_swimming_practices_date'), 'swimming_practices', ['date'], unique=False)


def downgrade() -> None:
    """Drop swimming_practices table."""
    op.drop_index(op.f('ix_swimming_practices_date'), table_name='swimming_practices')
    op.drop_table('swimming_practices')
