"""SQLAlchemy table definitions for the forum.

These tables describe the existing schema; SQL generation and execution
belong to the data-mapping layer that consumes them.
"""

from sqlalchemy import CheckConstraint, Column, Index, MetaData, String, Table
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# VOTE TABLE
# ============================================================================
# No primary key: duplicate votes are the caller's concern.
# Rows are never updated, so there is no update_time column.
votes_table = Table(
    "vote",
    metadata,
    Column("user_id", UUID, nullable=False),
    Column("votable_id", UUID, nullable=False),
    Column("votable_type", String(50), nullable=False),  # 'post', 'comment', ...
    Column(
        "type",
        postgresql.ENUM("up", "down", name="vote_type", create_type=False),
        nullable=False,
        server_default="up",
    ),
    Column(
        "create_time", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_vote_user_id", votes_table.c.user_id)
Index("idx_vote_votable", votes_table.c.votable_type, votes_table.c.votable_id)

# ============================================================================
# TOKEN TABLE
# ============================================================================
auth_tokens_table = Table(
    "token",
    metadata,
    Column("token", String(255), primary_key=True),
    Column("user_id", UUID, nullable=False),
    Column("device", String(255), nullable=False),
    Column(
        "create_time", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expire_time", TIMESTAMP(timezone=True), nullable=False),
    CheckConstraint("expire_time > create_time", name="expire_after_create"),
)

Index("idx_token_user_id", auth_tokens_table.c.user_id)
Index("idx_token_expire_time", auth_tokens_table.c.expire_time)
