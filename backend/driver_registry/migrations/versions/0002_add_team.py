from alembic import op
import sqlalchemy as sa

revision = '0002_add_team'
down_revision = '0001_create_formula_one_driver'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.add_column('formula_one_driver', sa.Column('team', sa.String(length=120), nullable=True))

def downgrade() -> None:
    with op.batch_alter_table('formula_one_driver') as batch_op:
        batch_op.drop_column('team')
