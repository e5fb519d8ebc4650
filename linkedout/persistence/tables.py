"""SQLAlchemy table definitions for LinkedOut.

Core tables only, no ORM classes. They match the schema defined in the
Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from linkedout.domain.value import VoteType

# Metadata object for all tables
metadata = MetaData()

VOTE_TYPE_VALUES = ", ".join(f"'{vote_type.value}'" for vote_type in VoteType)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("urn", String(64), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("urn", name="uq_posts_urn"),
)

Index("idx_posts_created_at", posts_table.c.created_at)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("voter_id", String(255), nullable=False),
    Column("vote_type", String(20), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "voter_id", name="uq_votes_post_voter"),
    CheckConstraint(f"vote_type IN ({VOTE_TYPE_VALUES})", name="ck_votes_vote_type"),
)

Index("idx_votes_post_id", votes_table.c.post_id)
Index("idx_votes_vote_type", votes_table.c.vote_type)

# ============================================================================
# LEADERBOARD TABLE (counter cache, one row per voted post)
# ============================================================================
COUNT_COLUMNS = {vote_type: f"{vote_type.value}_count" for vote_type in VoteType}

leaderboard_table = Table(
    "leaderboard",
    metadata,
    Column(
        "post_id",
        UUID,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("total_votes", Integer, nullable=False, server_default="0"),
    *[
        Column(name, Integer, nullable=False, server_default="0")
        for name in COUNT_COLUMNS.values()
    ],
    CheckConstraint("total_votes >= 0", name="ck_leaderboard_total_votes"),
    *[
        CheckConstraint(f"{name} >= 0", name=f"ck_leaderboard_{name}")
        for name in COUNT_COLUMNS.values()
    ],
)

Index("idx_leaderboard_total_votes", leaderboard_table.c.total_votes.desc())
for _name in COUNT_COLUMNS.values():
    Index(f"idx_leaderboard_{_name}", leaderboard_table.c[_name].desc())
