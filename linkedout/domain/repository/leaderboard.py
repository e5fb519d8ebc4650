"""Leaderboard repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from linkedout.domain.model.leaderboard import LeaderboardEntry
from linkedout.domain.value import VoteType


class LeaderboardRepository(ABC):
    """Read-side repository over per-post vote aggregates.

    Implementations either compute aggregates on demand from votes or read
    a counter table kept in step with vote writes. Both must return the same
    pages for the same vote history.
    """

    @abstractmethod
    async def find_all(
        self,
        vote_type: Optional[VoteType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[LeaderboardEntry]:
        """Find ranked leaderboard entries.

        Without vote_type, posts with at least one vote are ranked by total
        votes. With vote_type, only posts with at least one vote of that
        category are kept and ranked by that category's count. Ties are
        broken by created_at, then id, both descending.

        Args:
            vote_type: Category to filter and rank by (None for totals)
            limit: Maximum number of entries to return
            offset: Number of ranked entries to skip

        Returns:
            Ranked page of entries (possibly empty)
        """
        pass
