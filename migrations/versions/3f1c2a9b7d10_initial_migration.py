"""Initial migration

Revision ID: 3f1c2a9b7d10
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa


revision = '3f1c2a9b7d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
	op.create_table('voice_ban_log',
		sa.Column('id', sa.Integer(), nullable=False),
		sa.Column('name', sa.String(), nullable=False),
		sa.Column('player_id', sa.String(), nullable=True),
		sa.Column('reason', sa.String(), nullable=False),
		sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
		sa.PrimaryKeyConstraint('id')
	)
	op.create_index(op.f('ix_voice_ban_log_player_id'), 'voice_ban_log', ['player_id'], unique=False)


def downgrade():
	op.drop_index(op.f('ix_voice_ban_log_player_id'), table_name='voice_ban_log')
	op.drop_table('voice_ban_log')
