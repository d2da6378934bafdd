"""initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2024-08-02 00:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "receipt_scores",
        sa.Column("id", sa.BigInteger().with_variant(sa.Integer, "sqlite"), primary_key=True, autoincrement=True),
        sa.Column("points", sa.BigInteger, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("points >= 0", name="ck_receipt_scores_points_non_negative"),
    )

def downgrade():
    op.drop_table("receipt_scores")
