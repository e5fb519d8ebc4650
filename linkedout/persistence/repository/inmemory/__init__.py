"""In-memory repository implementations."""

from .leaderboard import InMemoryLeaderboardRepository
from .post import InMemoryPostRepository
from .unit_of_work import InMemoryUnitOfWork
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryLeaderboardRepository",
    "InMemoryPostRepository",
    "InMemoryUnitOfWork",
    "InMemoryVoteRepository",
]
