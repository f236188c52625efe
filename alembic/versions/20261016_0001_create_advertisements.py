"""create advertisements table

Revision ID: 20261016_0001
Revises: 
Create Date: 2026-10-16

"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261016_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "advertisements",
        sa.Column("id", sa.Integer(), sa.Identity(always=False), primary_key=True),
        sa.Column("company_name", sa.Text(), nullable=False),
        sa.Column("slogan", sa.Text(), nullable=False),
    )

    # Seeding looks rows up by company name.
    op.create_index(
        "ix_advertisements_company_name", "advertisements", ["company_name"]
    )


def downgrade() -> None:
    op.drop_index("ix_advertisements_company_name", table_name="advertisements")
    op.drop_table("advertisements")
