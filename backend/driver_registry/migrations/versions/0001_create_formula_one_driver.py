from alembic import op
import sqlalchemy as sa

revision = '0001_create_formula_one_driver'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'formula_one_driver',
        sa.Column('driver_number', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('full_name', sa.String(length=120), nullable=False),
    )
    op.create_index('ix_formula_one_driver_full_name', 'formula_one_driver', ['full_name'])

def downgrade() -> None:
    op.drop_index('ix_formula_one_driver_full_name', table_name='formula_one_driver')
    op.drop_table('formula_one_driver')
