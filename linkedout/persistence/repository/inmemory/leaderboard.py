"""In-memory leaderboard repository.

Tallies are computed on demand from the in-memory post and vote stores
instead of a counter table. Votes are grouped by post, so one page costs a
single pass over all votes plus the sort.
"""

from typing import Optional

from linkedout.domain.model.leaderboard import LeaderboardEntry
from linkedout.domain.repository.leaderboard import LeaderboardRepository
from linkedout.domain.value import VoteType

from .post import InMemoryPostRepository
from .vote import InMemoryVoteRepository


class InMemoryLeaderboardRepository(LeaderboardRepository):
    """In-memory implementation of LeaderboardRepository."""

    def __init__(
        self,
        post_repository: InMemoryPostRepository,
        vote_repository: InMemoryVoteRepository,
    ) -> None:
        self.post_repository = post_repository
        self.vote_repository = vote_repository

    async def find_all(
        self,
        vote_type: Optional[VoteType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[LeaderboardEntry]:
        """Find ranked leaderboard entries."""
        entries = []
        for post in self.post_repository.list_posts():
            counts = await self.vote_repository.count_by_post(post.id)
            entries.append(LeaderboardEntry.from_counts(post, counts))

        entries = [entry for entry in entries if entry.count_for(vote_type) > 0]
        entries.sort(
            key=lambda entry: (entry.count_for(vote_type), entry.created_at, entry.id),
            reverse=True,
        )

        return entries[offset : offset + limit]
