"""SQLAlchemy table definitions for the comment board.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import BigInteger, Column, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE (flat; threading is rebuilt on read)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    # No foreign key: parent references are not checked on write
    Column("parent_id", UUID, nullable=True),
    # Escaped text can be longer than the submission limits
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("ip", String(64), nullable=False),
)

Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# COUNTERS TABLE (named atomic counters)
# ============================================================================
counters_table = Table(
    "counters",
    metadata,
    Column("name", String(64), primary_key=True),
    Column("value", BigInteger, nullable=False, server_default="0"),
)
