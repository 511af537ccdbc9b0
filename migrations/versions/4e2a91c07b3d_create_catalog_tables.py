"""create systems, vendors and asset categories tables

Revision ID: 4e2a91c07b3d
Revises:
Create Date: 2025-10-02 09:12:41.508213

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4e2a91c07b3d'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _catalog_columns() -> list:
    return [
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('creation_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('latest_update_date', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'vendors',
        *_catalog_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_vendors_name'), 'vendors', ['name'], unique=True)

    op.create_table(
        'asset_categories',
        *_catalog_columns(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_asset_categories_name'), 'asset_categories', ['name'], unique=True)

    op.create_table(
        'systems',
        *_catalog_columns(),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('virtual_location', sa.String(length=255), nullable=True),
        sa.Column('organization', sa.String(length=255), nullable=True),
        sa.Column('additional_information', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_systems_name'), 'systems', ['name'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_systems_name'), table_name='systems')
    op.drop_table('systems')
    op.drop_index(op.f('ix_asset_categories_name'), table_name='asset_categories')
    op.drop_table('asset_categories')
    op.drop_index(op.f('ix_vendors_name'), table_name='vendors')
    op.drop_table('vendors')
