"""create game table holding the players/sessions document

Revision ID: 5c2e9a17b4d0
Revises:
Create Date: 2026-10-17 10:12:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2e9a17b4d0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    # Tables created by `flask db-reset` already match this revision
    if 'game' in set(insp.get_table_names()):
        return

    op.create_table(
        'game',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=64), nullable=False),
        sa.Column('players', sa.Text(), nullable=False),
        sa.Column('sessions', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_game_code'), 'game', ['code'], unique=True)


def downgrade():
    op.drop_index(op.f('ix_game_code'), table_name='game')
    op.drop_table('game')
