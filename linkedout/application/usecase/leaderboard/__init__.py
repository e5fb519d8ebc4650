"""Leaderboard use cases."""

from .get_leaderboard import (
    GetLeaderboardRequest,
    GetLeaderboardUseCase,
    LeaderboardEntryResponse,
)

__all__ = [
    "GetLeaderboardRequest",
    "GetLeaderboardUseCase",
    "LeaderboardEntryResponse",
]
