from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3a1f9c0d7b21"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "storage_slots",
        sa.Column("key", sa.String(length=64), primary_key=True),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=True,
        ),
    )


def downgrade():
    op.drop_table("storage_slots")
