"""create auth_outage table

Revision ID: 0001_create_auth_outage
Revises:
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_create_auth_outage'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'auth_outage',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('starttime', sa.Integer(), nullable=False),
        sa.Column('stoptime', sa.Integer(), nullable=False),
        sa.Column('warntime', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('createdby', sa.Integer(), nullable=True),
        sa.Column('modifiedby', sa.Integer(), nullable=True),
        sa.Column('lastmodified', sa.Integer(), nullable=True),
    )
    op.create_index('ix_auth_outage_window', 'auth_outage', ['starttime', 'stoptime', 'title'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_auth_outage_window', table_name='auth_outage')
    op.drop_table('auth_outage')
