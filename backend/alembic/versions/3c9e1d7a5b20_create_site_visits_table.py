"""create site_visits table

Revision ID: 3c9e1d7a5b20
Revises:
Create Date: 2026-10-18 09:12:41.208113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c9e1d7a5b20'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'site_visits',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('path', sa.String(length=255), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('session_duration', sa.Integer(), nullable=True),
        sa.Column('device_type', sa.String(length=32), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_site_visits_id'), 'site_visits', ['id'], unique=False)
    op.create_index(op.f('ix_site_visits_path'), 'site_visits', ['path'], unique=False)
    op.create_index(op.f('ix_site_visits_timestamp'), 'site_visits', ['timestamp'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_site_visits_timestamp'), table_name='site_visits')
    op.drop_index(op.f('ix_site_visits_path'), table_name='site_visits')
    op.drop_index(op.f('ix_site_visits_id'), table_name='site_visits')
    op.drop_table('site_visits')
