"""Leaderboard read model.

A LeaderboardEntry is the per-post rollup of vote counts. The same shape is
returned after a vote is submitted and by every leaderboard page.
"""

from datetime import datetime
from typing import Iterable

from pydantic import computed_field, field_validator

from linkedout.domain.model.common import DomainModel
from linkedout.domain.model.post import Post
from linkedout.domain.model.vote import VoteCount
from linkedout.domain.value import PostId, PostUrn, VoteType


class LeaderboardEntry(DomainModel):
    """Aggregated votes for a single post.

    ``votes`` always holds all seven categories in canonical order and
    ``total_votes`` is derived from it, so the two can never disagree.
    """

    id: PostId
    urn: PostUrn
    content: str
    created_at: datetime
    votes: dict[VoteType, int]

    @field_validator("votes", mode="before")
    @classmethod
    def zero_fill_votes(cls, v: dict) -> dict[VoteType, int]:
        """Fill missing categories with 0 and reject negative counts."""
        counts = {VoteType(key): value for key, value in v.items()}
        filled = {vote_type: counts.get(vote_type, 0) for vote_type in VoteType}
        if any(count < 0 for count in filled.values()):
            raise ValueError("Vote counts cannot be negative")
        return filled

    @computed_field
    @property
    def total_votes(self) -> int:
        """Sum of all category counts."""
        return sum(self.votes.values())

    @classmethod
    def from_counts(cls, post: Post, counts: Iterable[VoteCount]) -> "LeaderboardEntry":
        """Build an entry for a post from its grouped vote counts.

        Args:
            post: The post being aggregated
            counts: One VoteCount per category present (others are zero)

        Returns:
            Zero-filled leaderboard entry
        """
        return cls(
            id=post.id,
            urn=post.urn,
            content=post.content,
            created_at=post.created_at,
            votes={count.vote_type: count.count for count in counts},
        )

    def count_for(self, vote_type: VoteType | None) -> int:
        """Ranking key: a single category's count, or the total when None."""
        if vote_type is None:
            return self.total_votes
        return self.votes[vote_type]
