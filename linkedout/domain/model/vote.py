"""Vote entity.

Each voter holds at most one vote per post. Voting again replaces the
category of the existing vote instead of adding a new one.
"""

from datetime import datetime

from pydantic import Field

from linkedout.domain.model.common import DomainModel, utcnow
from linkedout.domain.value import PostId, VoteId, VoterId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per post (enforced by database unique constraint)
    - Re-voting overwrites vote_type; created_at keeps the first cast time
    """

    id: VoteId
    post_id: PostId
    voter_id: VoterId
    vote_type: VoteType
    created_at: datetime = Field(default_factory=utcnow)


class VoteCount(DomainModel):
    """Number of votes of one category on one post."""

    post_id: PostId
    vote_type: VoteType
    count: int = Field(ge=0)
