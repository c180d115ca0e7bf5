"""create users, themes, icons, livestreams and reactions tables

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 10:12:44.118305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('display_name', sa.String(length=255), nullable=True),
        sa.Column('password', sa.String(length=255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)

    op.create_table(
        'themes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('dark_mode', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_themes_id'), 'themes', ['id'], unique=False)
    op.create_index(op.f('ix_themes_user_id'), 'themes', ['user_id'], unique=False)

    op.create_table(
        'icons',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('image', sa.LargeBinary(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_icons_id'), 'icons', ['id'], unique=False)
    op.create_index(op.f('ix_icons_user_id'), 'icons', ['user_id'], unique=False)

    op.create_table(
        'icon_hashes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('icon_id', sa.Integer(), nullable=False),
        sa.Column('hash', sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(['icon_id'], ['icons.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_icon_hashes_id'), 'icon_hashes', ['id'], unique=False)
    op.create_index(op.f('ix_icon_hashes_icon_id'), 'icon_hashes', ['icon_id'], unique=False)

    op.create_table(
        'livestreams',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('playlist_url', sa.String(length=255), nullable=False),
        sa.Column('thumbnail_url', sa.String(length=255), nullable=False),
        sa.Column('start_at', sa.BigInteger(), nullable=False),
        sa.Column('end_at', sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_livestreams_id'), 'livestreams', ['id'], unique=False)

    op.create_table(
        'reactions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('emoji_name', sa.String(length=255), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('livestream_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(['livestream_id'], ['livestreams.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_reactions_id'), 'reactions', ['id'], unique=False)
    # Listing filters on livestream_id and sorts by created_at
    op.create_index('livestream_id_idx', 'reactions', ['livestream_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('livestream_id_idx', table_name='reactions')
    op.drop_index(op.f('ix_reactions_id'), table_name='reactions')
    op.drop_table('reactions')
    op.drop_index(op.f('ix_livestreams_id'), table_name='livestreams')
    op.drop_table('livestreams')
    op.drop_index(op.f('ix_icon_hashes_icon_id'), table_name='icon_hashes')
    op.drop_index(op.f('ix_icon_hashes_id'), table_name='icon_hashes')
    op.drop_table('icon_hashes')
    op.drop_index(op.f('ix_icons_user_id'), table_name='icons')
    op.drop_index(op.f('ix_icons_id'), table_name='icons')
    op.drop_table('icons')
    op.drop_index(op.f('ix_themes_user_id'), table_name='themes')
    op.drop_index(op.f('ix_themes_id'), table_name='themes')
    op.drop_table('themes')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
