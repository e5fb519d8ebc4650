"""Get leaderboard use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from linkedout.application.usecase.base import BaseUseCase
from linkedout.domain.error import InvalidCategoryError
from linkedout.domain.model.leaderboard import LeaderboardEntry
from linkedout.domain.repository import LeaderboardRepository
from linkedout.domain.value import VoteType


class LeaderboardEntryResponse(BaseModel):
    """Per-post vote tally in response.

    Serialized with camelCase keys (``totalVotes``, ``createdAt``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    urn: str
    content: str
    created_at: datetime
    total_votes: int
    votes: dict[str, int]

    @classmethod
    def from_entry(cls, entry: LeaderboardEntry) -> "LeaderboardEntryResponse":
        """Build a response item from a domain entry."""
        return cls(
            id=str(entry.id),
            urn=str(entry.urn),
            content=entry.content,
            created_at=entry.created_at,
            total_votes=entry.total_votes,
            votes={vote_type.value: count for vote_type, count in entry.votes.items()},
        )


class GetLeaderboardRequest(BaseModel):
    """Get leaderboard request."""

    vote_type: str | None = None  # Filter and rank by this category
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class GetLeaderboardUseCase(BaseUseCase):
    """Use case for reading a ranked page of the leaderboard."""

    def __init__(self, leaderboard_repository: LeaderboardRepository) -> None:
        """Initialize get leaderboard use case.

        Args:
            leaderboard_repository: Leaderboard repository
        """
        self.leaderboard_repository = leaderboard_repository

    async def execute(
        self, request: GetLeaderboardRequest
    ) -> list[LeaderboardEntryResponse]:
        """Execute get leaderboard flow.

        Args:
            request: Category filter and pagination

        Returns:
            Ranked page of entries, possibly empty

        Raises:
            InvalidCategoryError: If vote_type is given and unknown
        """
        with logfire.span(
            "get_leaderboard.execute",
            vote_type=request.vote_type,
            limit=request.limit,
            offset=request.offset,
        ):
            vote_type = None
            if request.vote_type is not None:
                if not VoteType.is_valid(request.vote_type):
                    raise InvalidCategoryError(request.vote_type)
                vote_type = VoteType(request.vote_type)

            entries = await self.leaderboard_repository.find_all(
                vote_type=vote_type,
                limit=request.limit,
                offset=request.offset,
            )

            logfire.info("Leaderboard listed", count=len(entries))

            return [LeaderboardEntryResponse.from_entry(entry) for entry in entries]
