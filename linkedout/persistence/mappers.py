"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from linkedout.domain.model import LeaderboardEntry, Post, Vote
from linkedout.domain.value import PostId, PostUrn, VoteId, VoterId, VoteType
from linkedout.persistence.tables import COUNT_COLUMNS


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        urn=PostUrn(row["urn"]),
        content=row["content"],
        created_at=row["created_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion
    """
    return post.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        voter_id=VoterId(row["voter_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_leaderboard_entry(row: Dict[str, Any]) -> LeaderboardEntry:
    """Convert a joined posts/leaderboard row to a LeaderboardEntry.

    Args:
        row: Row holding post columns and one count column per category

    Returns:
        LeaderboardEntry domain model
    """
    return LeaderboardEntry(
        id=PostId(_uuid(row["id"])),
        urn=PostUrn(row["urn"]),
        content=row["content"],
        created_at=row["created_at"],
        votes={
            vote_type: row[column] for vote_type, column in COUNT_COLUMNS.items()
        },
    )
