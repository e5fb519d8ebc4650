"""Domain model entities for LinkedOut."""

from linkedout.domain.model.leaderboard import LeaderboardEntry
from linkedout.domain.model.post import Post
from linkedout.domain.model.vote import Vote, VoteCount

__all__ = [
    "Post",
    "Vote",
    "VoteCount",
    "LeaderboardEntry",
]
