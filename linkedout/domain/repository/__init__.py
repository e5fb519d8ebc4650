"""Repository interfaces for LinkedOut domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from linkedout.domain.repository.leaderboard import LeaderboardRepository
from linkedout.domain.repository.post import PostRepository
from linkedout.domain.repository.unit_of_work import UnitOfWork
from linkedout.domain.repository.vote import VoteRepository

__all__ = [
    "PostRepository",
    "VoteRepository",
    "LeaderboardRepository",
    "UnitOfWork",
]
