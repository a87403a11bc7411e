"""Initial schema - users, posts, post_meta

Revision ID: 0001
Revises: 
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('login', sa.String(60), unique=True, nullable=False, index=True),
        sa.Column('email', sa.String(255), unique=True, nullable=False, index=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('nicename', sa.String(60), nullable=False, index=True),
        sa.Column('first_name', sa.String(100), nullable=False, server_default=''),
        sa.Column('last_name', sa.String(100), nullable=False, server_default=''),
        sa.Column('display_name', sa.String(250), nullable=False, server_default=''),
        sa.Column('roles', sa.JSON(), nullable=False),
        sa.Column('capabilities', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    # Posts, pages and revisions
    op.create_table(
        'posts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('post_type', sa.String(20), nullable=False, server_default='post', index=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='draft'),
        sa.Column('title', sa.Text(), nullable=False, server_default=''),
        sa.Column('slug', sa.String(200), nullable=False, server_default='', index=True),
        sa.Column('body', sa.Text(), nullable=False, server_default=''),
        sa.Column('parent_id', sa.Integer(), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=True, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    # Per-post key/value metadata
    op.create_table(
        'post_meta',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('meta_key', sa.String(255), nullable=False, index=True),
        sa.Column('meta_value', sa.JSON(), nullable=True),
        sa.UniqueConstraint('post_id', 'meta_key', name='uq_post_meta_key'),
    )


def downgrade() -> None:
    op.drop_table('post_meta')
    op.drop_table('posts')
    op.drop_table('users')
