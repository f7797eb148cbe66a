"""initial_schema

Create the comment board schema:
- Comments (flat rows with an unchecked parent reference)
- Counters (named atomic counters)

Revision ID: 3c1f6e2a9b47
Revises:
Create Date: 2026-10-19 10:12:04.551320

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f6e2a9b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(), primary_key=True),
        sa.Column("parent_id", postgresql.UUID(), nullable=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("ip", sa.String(64), nullable=False),
    )
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    op.create_table(
        "counters",
        sa.Column("name", sa.String(64), primary_key=True),
        sa.Column("value", sa.BigInteger(), nullable=False, server_default="0"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("counters")
    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_table("comments")
