"""Create card cache, generation and contact tables

Revision ID: a1c4e2f7b9d0
Revises:
Create Date: 2025-08-14 10:12:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c4e2f7b9d0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the five tables used by the content generator."""
    op.create_table(
        'cards_cache',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('card_name', sa.String(), nullable=False),
        sa.Column('bank_name', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('rewards_summary', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_cards_cache_slug', 'cards_cache', ['slug'], unique=True)

    op.create_table(
        'user_inputs',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('card_id', sa.String(), sa.ForeignKey('cards_cache.id'), nullable=True),
        sa.Column('platform', sa.String(), nullable=False),
        sa.Column('audience', sa.String(), nullable=False),
        sa.Column('language', sa.String(), nullable=False),
        sa.Column('tone', sa.String(), nullable=False),
        sa.Column('custom_prompt', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_user_inputs_card_id', 'user_inputs', ['card_id'])

    op.create_table(
        'ai_outputs',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('input_id', sa.String(), sa.ForeignKey('user_inputs.id'), nullable=True),
        sa.Column('variation_number', sa.Integer(), nullable=False),
        sa.Column('content_variation', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_ai_outputs_input_id', 'ai_outputs', ['input_id'])

    op.create_table(
        'generation_logs',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('input_id', sa.String(), sa.ForeignKey('user_inputs.id'), nullable=True),
        sa.Column('prompt_sent', sa.String(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('error_message', sa.String(), nullable=True),
        sa.Column('response_time_ms', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_generation_logs_input_id', 'generation_logs', ['input_id'])

    op.create_table(
        'contact_submissions',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('message', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    """Drop the content generator tables."""
    op.drop_table('contact_submissions')
    op.drop_index('ix_generation_logs_input_id', table_name='generation_logs')
    op.drop_table('generation_logs')
    op.drop_index('ix_ai_outputs_input_id', table_name='ai_outputs')
    op.drop_table('ai_outputs')
    op.drop_index('ix_user_inputs_card_id', table_name='user_inputs')
    op.drop_table('user_inputs')
    op.drop_index('ix_cards_cache_slug', table_name='cards_cache')
    op.drop_table('cards_cache')
