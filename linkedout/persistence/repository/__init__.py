"""PostgreSQL repository implementations."""

from linkedout.persistence.repository.leaderboard import PostgresLeaderboardRepository
from linkedout.persistence.repository.post import PostgresPostRepository
from linkedout.persistence.repository.unit_of_work import SessionUnitOfWork
from linkedout.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresVoteRepository",
    "PostgresLeaderboardRepository",
    "SessionUnitOfWork",
]
