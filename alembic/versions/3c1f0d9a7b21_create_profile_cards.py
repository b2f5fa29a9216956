"""create profile_cards

Revision ID: 3c1f0d9a7b21
Revises:
Create Date: 2026-10-18 09:12:40.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from careerpath.db.types import UTCDateTime


# revision identifiers, used by Alembic.
revision: str = '3c1f0d9a7b21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'profile_cards',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('bio', sa.String(length=200), nullable=False),
        sa.Column('skills', sa.Text(), nullable=False),
        sa.Column('profile_image', sa.Text(), nullable=True),
        sa.Column('theme', sa.String(length=16), nullable=False),
        sa.Column('created_at', UTCDateTime(), nullable=False),
        sa.Column('updated_at', UTCDateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_profile_cards')),
    )
    op.create_index(op.f('ix_profile_cards_created_at'), 'profile_cards', ['created_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_profile_cards_created_at'), table_name='profile_cards')
    op.drop_table('profile_cards')
