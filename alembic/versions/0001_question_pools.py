"""question pools

Revision ID: 0001_question_pools
Revises:
Create Date: 2026-10-19 10:12:41.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001_question_pools"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "question_pools",
        sa.Column("key", sa.String(length=128), nullable=False),
        sa.Column("category", sa.String(length=64), nullable=False),
        sa.Column("items", sa.JSON(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("key", name="pk_question_pools"),
    )
    op.create_index("ix_question_pools_category", "question_pools", ["category"])


def downgrade() -> None:
    op.drop_index("ix_question_pools_category", table_name="question_pools")
    op.drop_table("question_pools")
