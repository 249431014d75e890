"""create_content_tables

Revision ID: 4b1d7e2c9a10
Revises:
Create Date: 2026-10-18 09:12:44.381502

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1d7e2c9a10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the five content tables and the users table."""
    op.create_table('projects',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('long_description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(length=100), nullable=False),
        # JSON-encoded list of strings
        sa.Column('tools', sa.Text(), nullable=True),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column('case_study_url', sa.String(length=500), nullable=True),
        sa.Column('scorm_url', sa.String(length=500), nullable=True),
        sa.Column('demo_url', sa.String(length=500), nullable=True),
        sa.Column('featured', sa.Integer(), server_default='0', nullable=False),
        sa.Column('challenge', sa.Text(), nullable=True),
        sa.Column('solution', sa.Text(), nullable=True),
        sa.Column('process', sa.Text(), nullable=True),
        sa.Column('results', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_projects_category', 'projects', ['category'], unique=False)
    op.create_index('ix_projects_created_at', 'projects', ['created_at'], unique=False)

    op.create_table('blog_posts',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('excerpt', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('image_url', sa.String(length=500), nullable=True),
        sa.Column('read_time', sa.String(length=50), nullable=True),
        sa.Column('published', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_blog_posts_category', 'blog_posts', ['category'], unique=False)
    op.create_index('ix_blog_posts_created_at', 'blog_posts', ['created_at'], unique=False)

    op.create_table('testimonials',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=255), nullable=False),
        sa.Column('company', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('avatar_url', sa.String(length=500), nullable=True),
        sa.Column('rating', sa.String(length=10), server_default='5', nullable=False),
        sa.Column('featured', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_testimonials_created_at', 'testimonials', ['created_at'], unique=False)

    op.create_table('contact_submissions',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('company', sa.String(length=255), nullable=True),
        sa.Column('project_type', sa.String(length=100), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_contact_submissions_created_at', 'contact_submissions', ['created_at'], unique=False
    )

    op.create_table('resumes',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('filename', sa.String(length=255), nullable=False),
        sa.Column('original_name', sa.String(length=255), nullable=False),
        sa.Column('file_url', sa.String(length=500), nullable=False),
        sa.Column('parsed_content', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Integer(), server_default='0', nullable=False),
        sa.Column('uploaded_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_resumes_is_active', 'resumes', ['is_active'], unique=False)
    op.create_index('ix_resumes_uploaded_at', 'resumes', ['uploaded_at'], unique=False)

    op.create_table('users',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), server_default='', nullable=False),
        sa.Column('role', sa.String(length=20), server_default='user', nullable=False),
        sa.Column('token_version', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('last_login_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint("role IN ('admin', 'user')", name='ck_users_role'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
        sa.UniqueConstraint('username'),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('users')
    op.drop_index('ix_resumes_uploaded_at', table_name='resumes')
    op.drop_index('ix_resumes_is_active', table_name='resumes')
    op.drop_table('resumes')
    op.drop_index('ix_contact_submissions_created_at', table_name='contact_submissions')
    op.drop_table('contact_submissions')
    op.drop_index('ix_testimonials_created_at', table_name='testimonials')
    op.drop_table('testimonials')
    op.drop_index('ix_blog_posts_created_at', table_name='blog_posts')
    op.drop_index('ix_blog_posts_category', table_name='blog_posts')
    op.drop_table('blog_posts')
    op.drop_index('ix_projects_created_at', table_name='projects')
    op.drop_index('ix_projects_category', table_name='projects')
    op.drop_table('projects')
