"""Test configuration and fixtures."""

from datetime import datetime, timedelta, UTC
from uuid import uuid4

import logfire

from linkedout.domain.model import Post, Vote
from linkedout.domain.value import PostId, PostUrn, VoteId, VoterId, VoteType

# Keep spans and logs local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)


def make_post(
    urn: str = "7123456789012345678",
    content: str = "Thrilled to announce I have been humbled again.",
    minutes: int = 0,
) -> Post:
    """Build a post with a predictable creation time.

    Args:
        urn: Raw post URN
        content: Post text
        minutes: Offset from BASE_TIME, so later posts sort as newer

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(uuid4()),
        urn=PostUrn(urn),
        content=content,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


def make_vote(post: Post, voter: str, vote_type: VoteType) -> Vote:
    """Build a vote on a post."""
    return Vote(
        id=VoteId(uuid4()),
        post_id=post.id,
        voter_id=VoterId(voter),
        vote_type=vote_type,
    )
