"""Domain value objects for LinkedOut."""

from linkedout.domain.value.identifiers import PostId, VoteId
from linkedout.domain.value.types import (
    NEGATIVE_VOTES,
    POSITIVE_VOTES,
    PostUrn,
    VoterId,
    VoteType,
)

__all__ = [
    # Identifiers
    "PostId",
    "VoteId",
    # Types
    "PostUrn",
    "VoterId",
    "VoteType",
    "POSITIVE_VOTES",
    "NEGATIVE_VOTES",
]
