"""create_news_tables

Revision ID: 7c1e2a9b4d30
Revises:
Create Date: 2026-10-17 10:12:41.518204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c1e2a9b4d30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create feed source, post and category link tables."""
    op.create_table('rss_feeds',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('rss_url', sa.String(length=1000), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('status', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table('blogs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('source_img', sa.String(length=1000), nullable=True),
        sa.Column('source_name', sa.String(length=255), nullable=True),
        sa.Column('source_link', sa.String(length=767), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('status', sa.Integer(), nullable=False),
        sa.Column('pub_date', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_blogs_source_link'), 'blogs', ['source_link'], unique=True)
    op.create_table('blog_categories',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('blog_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['blog_id'], ['blogs.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_blog_categories_blog_id'), 'blog_categories', ['blog_id'], unique=False)


def downgrade() -> None:
    """Drop news tables."""
    op.drop_index(op.f('ix_blog_categories_blog_id'), table_name='blog_categories')
    op.drop_table('blog_categories')
    op.drop_index(op.f('ix_blogs_source_link'), table_name='blogs')
    op.drop_table('blogs')
    op.drop_table('rss_feeds')
