"""create player, game, question and answer tables

Revision ID: 3c9a1f2e7b10
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9a1f2e7b10'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
    ]


def upgrade():
    bind = op.get_bind()
    existing_tables = set(sa.inspect(bind).get_table_names())

    # Databases created with `flask db-reset` already have the tables
    if 'player' not in existing_tables:
        op.create_table(
            'player',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(length=128), nullable=False),
            *_timestamps(),
        )
        op.create_index('ix_player_name', 'player', ['name'])

    if 'game' not in existing_tables:
        op.create_table(
            'game',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('player_id', sa.Integer(), sa.ForeignKey('player.id'), nullable=False),
            sa.Column('difficulty', sa.Integer(), nullable=False),
            sa.Column('start_time', sa.DateTime(), nullable=False),
            sa.Column('end_time', sa.DateTime(), nullable=True),
            sa.Column('current_score', sa.Float(), nullable=False),
            sa.Column('total_time_spent', sa.Float(), nullable=False),
            *_timestamps(),
        )
        op.create_index('ix_game_player_id', 'game', ['player_id'])

    if 'question' not in existing_tables:
        op.create_table(
            'question',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('game_id', sa.Integer(), sa.ForeignKey('game.id'), nullable=False),
            sa.Column('question_text', sa.String(length=255), nullable=False),
            sa.Column('correct_answer', sa.Float(), nullable=False),
            sa.Column('order_index', sa.Integer(), nullable=False),
            *_timestamps(),
            sa.UniqueConstraint('game_id', 'order_index', name='uq_question_game_order'),
        )
        op.create_index('ix_question_game_id', 'question', ['game_id'])

    if 'answer' not in existing_tables:
        op.create_table(
            'answer',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('question_id', sa.Integer(), sa.ForeignKey('question.id'), nullable=False),
            sa.Column('player_answer', sa.Float(), nullable=False),
            sa.Column('time_taken', sa.Float(), nullable=False),
            sa.Column('is_correct', sa.Boolean(), nullable=False),
            sa.Column('submitted_at', sa.DateTime(), nullable=False),
            *_timestamps(),
        )
        op.create_index('ix_answer_question_id', 'answer', ['question_id'])


def downgrade():
    op.drop_index('ix_answer_question_id', table_name='answer')
    op.drop_table('answer')
    op.drop_index('ix_question_game_id', table_name='question')
    op.drop_table('question')
    op.drop_index('ix_game_player_id', table_name='game')
    op.drop_table('game')
    op.drop_index('ix_player_name', table_name='player')
    op.drop_table('player')
