# migrations/versions/001_create_resources.py
"""create resources

Revision ID: 001
Revises: 
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = ('resource_service',)
depends_on = None

def upgrade():
    # Tabela resources (resource service database)
    op.create_table('resources',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('data', sa.LargeBinary(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

def downgrade():
    op.drop_table('resources')
