"""create_accounts_and_friends

Revision ID: a3f1c2d4e5b6
Revises:
Create Date: 2025-06-02 10:14:03.512201

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a3f1c2d4e5b6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


friendship_status = sa.Enum('pending', 'accepted', 'blocked', name='friendship_status')


def upgrade() -> None:
    op.create_table(
        'accounts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('hashed_password', sa.String(length=1024), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_superuser', sa.Boolean(), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('position', sa.String(length=255), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('education', sa.String(length=500), nullable=True),
        sa.Column('expertise', sa.JSON(), nullable=False),
        sa.Column('hobbies', sa.JSON(), nullable=False),
        sa.Column('adjectives', sa.JSON(), nullable=False),
        sa.Column('social_links', sa.JSON(), nullable=False),
        sa.Column('profile_picture_url', sa.String(length=1000), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_accounts_email', 'accounts', ['email'], unique=True)
    op.create_index('ix_accounts_name', 'accounts', ['name'])

    op.create_table(
        'friends',
        sa.Column('id_friendship', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('requester_id', sa.Integer(), nullable=False),
        sa.Column('target_id', sa.Integer(), nullable=False),
        sa.Column('status', friendship_status, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id_friendship'),
        sa.ForeignKeyConstraint(['requester_id'], ['accounts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['target_id'], ['accounts.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('requester_id', 'target_id', name='uq_friends_requester_target'),
        sa.CheckConstraint('requester_id <> target_id', name='ck_friends_no_self')
    )
    op.create_index('ix_friends_id_friendship', 'friends', ['id_friendship'])
    op.create_index('ix_friends_requester_id', 'friends', ['requester_id'])
    op.create_index('ix_friends_target_id', 'friends', ['target_id'])


def downgrade() -> None:
    op.drop_index('ix_friends_target_id', 'friends')
    op.drop_index('ix_friends_requester_id', 'friends')
    op.drop_index('ix_friends_id_friendship', 'friends')
    op.drop_table('friends')
    friendship_status.drop(op.get_bind(), checkfirst=True)

    op.drop_index('ix_accounts_name', 'accounts')
    op.drop_index('ix_accounts_email', 'accounts')
    op.drop_table('accounts')
