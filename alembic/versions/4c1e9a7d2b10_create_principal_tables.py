"""create_principal_tables

Creates the users, companies and admins credential tables.

Each principal type has its own table with a unique email index; admins
additionally carry a role (superadmin or moderator).

Revision ID: 4c1e9a7d2b10
Revises:
Create Date: 2026-10-19 09:12:44.318205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1e9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _credential_columns():
    return [
        sa.Column('id', sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Create the three credential tables."""

    # 1. users (job seekers)
    op.create_table(
        'users',
        *_credential_columns(),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('avatar_url', sa.String(), nullable=True),
        sa.Column('resume_url', sa.String(), nullable=True),
    )

    # 2. companies (employers)
    op.create_table(
        'companies',
        *_credential_columns(),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('logo_url', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
    )

    # 3. admins
    op.create_table(
        'admins',
        *_credential_columns(),
        sa.Column('role', sa.Enum('superadmin', 'moderator', name='adminrole'), nullable=False, server_default='moderator'),
    )

    # Email uniqueness is per principal table; login and registration rely on it
    for table in ('users', 'companies', 'admins'):
        op.create_index(f'ix_{table}_id', table, ['id'])
        op.create_index(f'ix_{table}_email', table, ['email'], unique=True)


def downgrade() -> None:
    """Drop the credential tables."""
    for table in ('admins', 'companies', 'users'):
        op.drop_index(f'ix_{table}_email', table_name=table)
        op.drop_index(f'ix_{table}_id', table_name=table)
        op.drop_table(table)

    sa.Enum(name='adminrole').drop(op.get_bind(), checkfirst=True)
