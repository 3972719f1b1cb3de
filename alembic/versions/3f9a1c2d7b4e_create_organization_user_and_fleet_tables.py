"""Create organization, user, membership and fleet tables

Revision ID: 3f9a1c2d7b4e
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2d7b4e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create organization table
    op.create_table(
        'organization',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    )

    # Create user table
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('given_name', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_user_email', 'user', ['email'])

    # Create organization_user table
    op.create_table(
        'organization_user',
        sa.Column('user_id', sa.Uuid(), primary_key=True),
        sa.Column('organization_id', sa.Uuid(), primary_key=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.ForeignKeyConstraint(['organization_id'], ['organization.id']),
    )
    op.create_index('ix_organization_user_user_id', 'organization_user', ['user_id'])
    op.create_index('ix_organization_user_organization_id', 'organization_user', ['organization_id'])

    # Create fleet table
    op.create_table(
        'fleet',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('organization_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('is_default', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.ForeignKeyConstraint(['organization_id'], ['organization.id']),
    )
    op.create_index('ix_fleet_organization_id', 'fleet', ['organization_id'])
    op.create_index(
        'uq_fleet_default_per_organization',
        'fleet',
        ['organization_id'],
        unique=True,
        postgresql_where=sa.text('is_default'),
        sqlite_where=sa.text('is_default = 1'),
    )


def downgrade() -> None:
    op.drop_index('uq_fleet_default_per_organization', table_name='fleet')
    op.drop_index('ix_fleet_organization_id', table_name='fleet')
    op.drop_table('fleet')
    op.drop_index('ix_organization_user_organization_id', table_name='organization_user')
    op.drop_index('ix_organization_user_user_id', table_name='organization_user')
    op.drop_table('organization_user')
    op.drop_index('ix_user_email', table_name='user')
    op.drop_table('user')
    op.drop_table('organization')
