# migrations/versions/002_create_songs.py
"""create songs

Revision ID: 002
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '002'
down_revision = None
branch_labels = ('song_service',)
depends_on = None

def upgrade():
    # Tabela songs (song service database); id comes from the resource service
    op.create_table('songs',
        sa.Column('id', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('artist', sa.String(length=100), nullable=False),
        sa.Column('album', sa.String(length=100), nullable=False),
        sa.Column('duration', sa.String(length=5), nullable=False),
        sa.Column('year', sa.String(length=4), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

def downgrade():
    op.drop_table('songs')
