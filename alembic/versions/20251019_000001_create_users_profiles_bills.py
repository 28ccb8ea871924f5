"""Create users, profiles and bills tables

Revision ID: 20251019_000001
Revises: None
Create Date: 2025-10-19

Landlord accounts, their tenant profiles, and per-profile bills.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20251019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the users, profiles and bills tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('name', sa.String(200), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'profiles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('tenant_name', sa.String(200), nullable=False),
        sa.Column('contact_number', sa.String(50), nullable=False),
        sa.Column('room_number', sa.String(50), nullable=False),
        sa.Column('rent', sa.Integer(), nullable=True),
        sa.Column('security_deposit', sa.Integer(), nullable=True),
        sa.Column('move_in_date', sa.Date(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['user_id'],
            ['users.id'],
            name='fk_profiles_user_id',
            ondelete='CASCADE'
        ),
    )
    op.create_index('ix_profiles_user_id', 'profiles', ['user_id'])

    op.create_table(
        'bills',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('rent', sa.Integer(), nullable=False),
        sa.Column('electric', sa.Integer(), nullable=True),
        sa.Column('gas', sa.Integer(), nullable=True),
        sa.Column('water', sa.Integer(), nullable=True),
        sa.Column('custom_fields', sa.JSON(), nullable=True),
        sa.Column('total', sa.Integer(), nullable=False),
        sa.Column('contact_number', sa.String(50), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column(
            'status',
            sa.Enum('PENDING', 'PAID', name='bill_status', create_constraint=True),
            nullable=False,
            server_default='PENDING'
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['profile_id'],
            ['profiles.id'],
            name='fk_bills_profile_id',
            ondelete='CASCADE'
        ),
    )

    # Create indexes for common queries
    op.create_index('ix_bills_profile_id', 'bills', ['profile_id'])
    op.create_index('ix_bills_date', 'bills', ['date'])
    op.create_index('ix_bills_status', 'bills', ['status'])


def downgrade() -> None:
    """Drop the bills, profiles and users tables."""
    op.drop_index('ix_bills_status', table_name='bills')
    op.drop_index('ix_bills_date', table_name='bills')
    op.drop_index('ix_bills_profile_id', table_name='bills')
    op.drop_table('bills')

    op.drop_index('ix_profiles_user_id', table_name='profiles')
    op.drop_table('profiles')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    # Drop the enum type (only PostgreSQL keeps it as a separate object)
    if op.get_bind().dialect.name == "postgresql":
        op.execute("DROP TYPE IF EXISTS bill_status")
