"""initial_schema

Create the LinkedOut schema:
- Posts (one row per LinkedIn URN)
- Votes (one row per voter per post, seven categories)
- Leaderboard (per-post counter cache kept in step with votes)

Revision ID: 3f1c9a7d2b40
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

VOTE_TYPES = ("solid", "interesting", "salesman", "bullshit", "scam", "guru", "theater")


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("urn", sa.String(64), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("urn", name="uq_posts_urn"),
    )
    op.create_index("idx_posts_created_at", "posts", ["created_at"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    vote_type_values = ", ".join(f"'{vote_type}'" for vote_type in VOTE_TYPES)
    op.create_table(
        "votes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.String(255), nullable=False),
        sa.Column("vote_type", sa.String(20), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("post_id", "voter_id", name="uq_votes_post_voter"),
        sa.CheckConstraint(
            f"vote_type IN ({vote_type_values})", name="ck_votes_vote_type"
        ),
    )
    op.create_index("idx_votes_post_id", "votes", ["post_id"])
    op.create_index("idx_votes_vote_type", "votes", ["vote_type"])

    # ========================================================================
    # LEADERBOARD table (counter cache)
    # ========================================================================
    count_columns = [f"{vote_type}_count" for vote_type in VOTE_TYPES]
    op.create_table(
        "leaderboard",
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("total_votes", sa.Integer(), nullable=False, server_default="0"),
        *[
            sa.Column(name, sa.Integer(), nullable=False, server_default="0")
            for name in count_columns
        ],
        sa.PrimaryKeyConstraint("post_id"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.CheckConstraint("total_votes >= 0", name="ck_leaderboard_total_votes"),
        *[
            sa.CheckConstraint(f"{name} >= 0", name=f"ck_leaderboard_{name}")
            for name in count_columns
        ],
    )
    op.create_index(
        "idx_leaderboard_total_votes", "leaderboard", [sa.text("total_votes DESC")]
    )
    for name in count_columns:
        op.create_index(f"idx_leaderboard_{name}", "leaderboard", [sa.text(f"{name} DESC")])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("leaderboard")
    op.drop_table("votes")
    op.drop_table("posts")
