"""initial_schema_users_webpages_and_analysis_results

Revision ID: 001
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.String(), nullable=False),
        *_timestamps(),
        sa.Column('email', sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # Create webpages table
    op.create_table(
        'webpages',
        sa.Column('id', sa.String(), nullable=False),
        *_timestamps(),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('html_content_id', sa.String(), nullable=False),
        sa.Column('url', sa.String(2000), nullable=True),
        sa.Column('file_name', sa.String(), nullable=True),
        sa.Column('name', sa.String(100), nullable=True),
        sa.Column('design_file_id', sa.String(), nullable=True),
        sa.Column('specification_file_id', sa.String(), nullable=True),
        sa.Column('upload_date', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_webpages_id'), 'webpages', ['id'], unique=False)
    op.create_index(op.f('ix_webpages_user_id'), 'webpages', ['user_id'], unique=False)

    # Create webpage_analysis_results table
    op.create_table(
        'webpage_analysis_results',
        sa.Column('id', sa.String(), nullable=False),
        *_timestamps(),
        sa.Column('webpage_id', sa.String(), nullable=False),
        sa.Column('llm_response', sa.JSON(), nullable=True),
        sa.Column('web_audit_results', sa.JSON(), nullable=True),
        sa.Column('axe_core_error', sa.Boolean(), nullable=False),
        sa.Column('nu_validator_error', sa.Boolean(), nullable=False),
        sa.Column('page_speed_error', sa.Boolean(), nullable=False),
        sa.Column('llm_error', sa.Boolean(), nullable=False),
        sa.Column('responsiveness_error', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['webpage_id'], ['webpages.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_webpage_analysis_results_id'), 'webpage_analysis_results', ['id'], unique=False
    )
    op.create_index(
        op.f('ix_webpage_analysis_results_webpage_id'),
        'webpage_analysis_results',
        ['webpage_id'],
        unique=True,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_webpage_analysis_results_webpage_id'), table_name='webpage_analysis_results')
    op.drop_index(op.f('ix_webpage_analysis_results_id'), table_name='webpage_analysis_results')
    op.drop_table('webpage_analysis_results')
    op.drop_index(op.f('ix_webpages_user_id'), table_name='webpages')
    op.drop_index(op.f('ix_webpages_id'), table_name='webpages')
    op.drop_table('webpages')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
